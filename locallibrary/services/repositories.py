"""Capabilities the book details handler needs from storage.

A book is a mapping with ``title`` and ``author`` (the resolved author mapping,
or ``None`` when the book has no author relation). Copies are mappings holding
only the requested fields.
"""
from typing import Any, Dict, List, Optional, Protocol, Sequence

COPY_FIELDS = ("imprint", "status")


class BookRepository(Protocol):
    async def find_one_with_author(self, book_id: str) -> Optional[Dict[str, Any]]:
        ...


class BookInstanceRepository(Protocol):
    async def find_copies(
        self, book_id: str, fields: Sequence[str] = COPY_FIELDS
    ) -> Optional[List[Dict[str, Any]]]:
        ...
