from typing import Any, Dict, List, Optional, Sequence
import logging

from neo4j import AsyncDriver

from locallibrary.services.repositories import COPY_FIELDS

logger = logging.getLogger(__name__)


BOOK_WITH_AUTHOR = """
MATCH (b:Book {bookId: $book_id})
OPTIONAL MATCH (b)-[:WRITTEN_BY]->(a:Author)
RETURN b.title AS title, a AS author
LIMIT 1
"""

COPIES_OF_BOOK = """
MATCH (i:BookInstance)-[:COPY_OF]->(:Book {bookId: $book_id})
RETURN properties(i) AS props
"""


class Neo4jBookRepository:
    """Reads Book nodes and resolves their WRITTEN_BY author."""

    def __init__(self, driver: AsyncDriver, database: Optional[str] = None):
        self.driver = driver
        self.database = database

    async def find_one_with_author(self, book_id: str) -> Optional[Dict[str, Any]]:
        async with self.driver.session(database=self.database) as session:
            result = await session.run(BOOK_WITH_AUTHOR, {"book_id": book_id})
            record = await result.single()

        if record is None:
            logger.debug(f"No Book node with bookId {book_id}")
            return None

        author = record["author"]
        return {
            "title": record["title"],
            "author": dict(author.items()) if author is not None else None,
        }


class Neo4jBookInstanceRepository:
    """Reads the BookInstance nodes that are COPY_OF a book."""

    def __init__(self, driver: AsyncDriver, database: Optional[str] = None):
        self.driver = driver
        self.database = database

    async def find_copies(
        self, book_id: str, fields: Sequence[str] = COPY_FIELDS
    ) -> Optional[List[Dict[str, Any]]]:
        async with self.driver.session(database=self.database) as session:
            result = await session.run(COPIES_OF_BOOK, {"book_id": book_id})
            rows = await result.data()

        copies = [{field: row["props"].get(field) for field in fields} for row in rows]
        logger.debug(f"Found {len(copies)} copies of book {book_id}")
        return copies
