from typing import Any, Dict, Iterable, List, Optional, Sequence

from locallibrary.services.repositories import COPY_FIELDS

# Simple in-memory storage for tests and local runs without a database.
# Books reference their author by id: {book_id: {"title": str, "author": author_id | None}}


class InMemoryBookRepository:
    def __init__(
        self,
        books: Optional[Dict[str, Dict[str, Any]]] = None,
        authors: Optional[Dict[str, Dict[str, Any]]] = None,
    ):
        self.books = dict(books or {})
        self.authors = dict(authors or {})

    def add_author(self, author_id: str, **fields: Any) -> None:
        self.authors[author_id] = fields

    def add_book(self, book_id: str, title: str, author: Optional[str] = None) -> None:
        self.books[book_id] = {"title": title, "author": author}

    async def find_one_with_author(self, book_id: str) -> Optional[Dict[str, Any]]:
        book = self.books.get(book_id)
        if book is None:
            return None
        author_id = book.get("author")
        author = self.authors.get(author_id) if author_id is not None else None
        return {
            "title": book.get("title"),
            "author": dict(author) if author is not None else None,
        }


class InMemoryBookInstanceRepository:
    def __init__(self, instances: Optional[Iterable[Dict[str, Any]]] = None):
        self.instances: List[Dict[str, Any]] = list(instances or [])

    def add_instance(self, book_id: str, imprint: str, status: str) -> None:
        self.instances.append({"book": book_id, "imprint": imprint, "status": status})

    async def find_copies(
        self, book_id: str, fields: Sequence[str] = COPY_FIELDS
    ) -> Optional[List[Dict[str, Any]]]:
        return [
            {field: instance.get(field) for field in fields}
            for instance in self.instances
            if instance.get("book") == book_id
        ]
