from typing import Optional
import logging

from fastapi import APIRouter, Depends

from locallibrary.api.response import ResponseCollector
from locallibrary.core.config import get_settings
from locallibrary.db.neo4j import get_driver
from locallibrary.schemas.book import BookDetails
from locallibrary.services.book_details import BookDetailsHandler
from locallibrary.services.graph import Neo4jBookInstanceRepository, Neo4jBookRepository
from locallibrary.services.repositories import BookInstanceRepository, BookRepository

logger = logging.getLogger(__name__)
router = APIRouter()

DETAILS_RESPONSES = {
    200: {"model": BookDetails},
    404: {"description": "Book or its copies not found", "content": {"text/plain": {}}},
    500: {"description": "Error fetching the book", "content": {"text/plain": {}}},
}


def get_book_repository() -> BookRepository:
    return Neo4jBookRepository(get_driver(), database=get_settings().neo4j_database)


def get_book_instance_repository() -> BookInstanceRepository:
    return Neo4jBookInstanceRepository(get_driver(), database=get_settings().neo4j_database)


def get_book_details_handler(
    books: BookRepository = Depends(get_book_repository),
    copies: BookInstanceRepository = Depends(get_book_instance_repository),
) -> BookDetailsHandler:
    return BookDetailsHandler(books, copies)


async def render_book_details(handler: BookDetailsHandler, book_id: Optional[str]):
    res = ResponseCollector()
    await handler.handle(res, book_id)
    return res.to_response()


@router.get("/health")
async def health_check():
    return {"status": "ok"}


@router.get("/book_dtls", responses=DETAILS_RESPONSES)
async def show_book_dtls(
    id: Optional[str] = None,
    handler: BookDetailsHandler = Depends(get_book_details_handler),
):
    """Book title, author name and copies for the `id` query parameter."""
    return await render_book_details(handler, id)


@router.get("/books/{book_id}", responses=DETAILS_RESPONSES)
async def show_book(
    book_id: str,
    handler: BookDetailsHandler = Depends(get_book_details_handler),
):
    return await render_book_details(handler, book_id)
