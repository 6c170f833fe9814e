import logging
from typing import Any

from locallibrary.api.response import ResponseWriter
from locallibrary.services.repositories import (
    COPY_FIELDS,
    BookInstanceRepository,
    BookRepository,
)

logger = logging.getLogger(__name__)


def book_not_found(book_id: Any) -> str:
    return f"Book {book_id} not found"


def details_not_found(book_id: Any) -> str:
    return f"Book details not found for book {book_id}"


def fetch_error(book_id: Any) -> str:
    return f"Error fetching book {book_id}"


class BookDetailsHandler:
    """Looks up a book and its copies and writes the details view.

    The two reads run one after the other: the book (with its author
    resolved), then the copies projected to imprint and status. Every failure
    is turned into a single 404 or 500 text response; a book whose author
    relation is missing is reported as a fetch error.
    """

    def __init__(self, books: BookRepository, copies: BookInstanceRepository):
        self.books = books
        self.copies = copies

    async def handle(self, res: ResponseWriter, book_id: Any) -> None:
        if not isinstance(book_id, str) or not book_id:
            logger.warning(f"Rejected book id {book_id!r}")
            res.status(404).send(book_not_found(book_id))
            return

        try:
            book = await self.books.find_one_with_author(book_id)
        except Exception:
            logger.exception(f"Error fetching book {book_id}")
            res.status(500).send(fetch_error(book_id))
            return

        if book is None:
            logger.warning(f"Book {book_id} not found")
            res.status(404).send(book_not_found(book_id))
            return

        try:
            copies = await self.copies.find_copies(book_id, COPY_FIELDS)
        except Exception:
            logger.exception(f"Error fetching copies of book {book_id}")
            res.status(500).send(fetch_error(book_id))
            return

        author = book.get("author")
        if author is None:
            logger.error(f"Book {book_id} has no author")
            res.status(500).send(fetch_error(book_id))
            return

        if copies is None:
            logger.warning(f"No copies result for book {book_id}")
            res.status(404).send(details_not_found(book_id))
            return

        logger.info(f"Book {book_id} found with {len(copies)} copies")
        res.send({
            "title": book.get("title"),
            "author": author.get("name"),
            "copies": copies,
        })
