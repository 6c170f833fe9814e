from unittest.mock import AsyncMock, MagicMock

import pytest

from locallibrary.services.storage import InMemoryBookInstanceRepository, InMemoryBookRepository

BOOK_ID = "12345"


@pytest.fixture
def mock_book():
    return {"title": "Mock Book Title", "author": {"name": "Mock Author"}}


@pytest.fixture
def mock_copies():
    return [
        {"imprint": "First Edition", "status": "Available"},
        {"imprint": "Second Edition", "status": "Checked Out"},
    ]


@pytest.fixture
def res():
    """Response double whose status() chains into send()."""
    response = MagicMock()
    response.status.return_value = response
    return response


@pytest.fixture
def book_repo(mock_book):
    repo = MagicMock()
    repo.find_one_with_author = AsyncMock(return_value=mock_book)
    return repo


@pytest.fixture
def copy_repo(mock_copies):
    repo = MagicMock()
    repo.find_copies = AsyncMock(return_value=mock_copies)
    return repo


@pytest.fixture
def library():
    books = InMemoryBookRepository()
    books.add_author("a1", name="Mock Author")
    books.add_author("a2")
    books.add_book(BOOK_ID, "Mock Book Title", author="a1")
    books.add_book("nameless", "Anonymous Tales", author="a2")
    books.add_book("orphan", "No Author Here")
    books.add_book("uncopied", "Never Printed", author="a1")

    copies = InMemoryBookInstanceRepository()
    copies.add_instance(BOOK_ID, "First Edition", "Available")
    copies.add_instance(BOOK_ID, "Second Edition", "Checked Out")
    copies.add_instance("nameless", "Pamphlet", "Loaned")
    return books, copies
