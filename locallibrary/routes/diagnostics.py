from fastapi import APIRouter

from locallibrary.core.config import get_settings
from locallibrary.db.neo4j import get_driver, verify_connection

router = APIRouter()

COUNT_LIBRARY = """
OPTIONAL MATCH (b:Book) WITH count(b) AS books
OPTIONAL MATCH (a:Author) WITH books, count(a) AS authors
OPTIONAL MATCH (i:BookInstance) WITH books, authors, count(i) AS copies
RETURN books, authors, copies
"""


@router.get("/db/status")
async def db_status():
    """Checks the Neo4j connection and counts the library nodes."""
    try:
        if not await verify_connection():
            return {"status": "error", "message": "Neo4j connection test failed"}
        async with get_driver().session(database=get_settings().neo4j_database) as session:
            result = await session.run(COUNT_LIBRARY)
            record = await result.single()
        return {
            "status": "connected",
            "books": record["books"],
            "authors": record["authors"],
            "copies": record["copies"],
            "message": "Neo4j database connection successful",
        }
    except Exception as e:
        return {"status": "error", "message": str(e)}
