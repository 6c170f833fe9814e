"""Demo library data for local development.

Run with: python -m locallibrary.db.seed [--clear]

All demo nodes carry ids prefixed with ``demo_`` so they can be removed again
without touching real data.
"""
import asyncio
from typing import Optional

import typer
from neo4j import AsyncDriver
from rich.console import Console

from locallibrary.core.config import get_settings
from locallibrary.db.neo4j import close_driver, get_driver
from locallibrary.schemas.book import BookInstanceStatus

console = Console()
app = typer.Typer(help="Seed or clear the demo library in Neo4j")

DEMO_AUTHORS = [
    {"authorId": "demo_author_tolkien", "name": "J.R.R. Tolkien"},
    {"authorId": "demo_author_rowling", "name": "J.K. Rowling"},
]

DEMO_BOOKS = [
    {"bookId": "demo_book_hobbit", "title": "The Hobbit", "authorId": "demo_author_tolkien"},
    {"bookId": "demo_book_hp1", "title": "Harry Potter and the Philosopher's Stone", "authorId": "demo_author_rowling"},
]

DEMO_COPIES = [
    {"instanceId": "demo_copy_1", "bookId": "demo_book_hobbit", "imprint": "George Allen & Unwin, 1937",
     "status": BookInstanceStatus.AVAILABLE.value},
    {"instanceId": "demo_copy_2", "bookId": "demo_book_hobbit", "imprint": "HarperCollins, 2012",
     "status": BookInstanceStatus.LOANED.value},
    {"instanceId": "demo_copy_3", "bookId": "demo_book_hp1", "imprint": "Bloomsbury, 1997",
     "status": BookInstanceStatus.MAINTENANCE.value},
    {"instanceId": "demo_copy_4", "bookId": "demo_book_hp1", "imprint": "Bloomsbury, 2014",
     "status": BookInstanceStatus.RESERVED.value},
]

MERGE_AUTHORS = """
UNWIND $authors AS row
MERGE (a:Author {authorId: row.authorId})
SET a.name = row.name
"""

MERGE_BOOKS = """
UNWIND $books AS row
MERGE (b:Book {bookId: row.bookId})
SET b.title = row.title
WITH b, row
MATCH (a:Author {authorId: row.authorId})
MERGE (b)-[:WRITTEN_BY]->(a)
"""

MERGE_COPIES = """
UNWIND $copies AS row
MATCH (b:Book {bookId: row.bookId})
MERGE (i:BookInstance {instanceId: row.instanceId})
SET i.imprint = row.imprint, i.status = row.status
MERGE (i)-[:COPY_OF]->(b)
"""

CLEAR_DEMO = """
MATCH (n)
WHERE n.bookId STARTS WITH 'demo_'
   OR n.authorId STARTS WITH 'demo_'
   OR n.instanceId STARTS WITH 'demo_'
DETACH DELETE n
"""


async def seed_library(driver: AsyncDriver, database: Optional[str] = None) -> None:
    async with driver.session(database=database) as session:
        await session.run(MERGE_AUTHORS, {"authors": DEMO_AUTHORS})
        await session.run(MERGE_BOOKS, {"books": DEMO_BOOKS})
        await session.run(MERGE_COPIES, {"copies": DEMO_COPIES})


async def clear_library(driver: AsyncDriver, database: Optional[str] = None) -> None:
    async with driver.session(database=database) as session:
        await session.run(CLEAR_DEMO)


async def _run(clear: bool) -> None:
    try:
        database = get_settings().neo4j_database
        if clear:
            await clear_library(get_driver(), database)
        else:
            await seed_library(get_driver(), database)
    finally:
        await close_driver()


@app.command()
def main(
    clear: bool = typer.Option(False, "--clear", help="Remove the demo data instead of creating it"),
) -> None:
    """Create (or remove) the demo authors, books and copies."""
    try:
        asyncio.run(_run(clear))
    except Exception as e:
        console.print(f"[red]❌ Failed to {'clear' if clear else 'seed'} demo library: {e}[/red]")
        raise typer.Exit(code=1) from e

    if clear:
        console.print("[green]✅ Demo library cleared[/green]")
    else:
        console.print(
            f"[green]✅ Demo library created: {len(DEMO_BOOKS)} books, "
            f"{len(DEMO_COPIES)} copies[/green]"
        )


if __name__ == "__main__":
    app()
