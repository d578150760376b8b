"""
Book endpoints.

These routes list books, retrieve a single book and create new ones.
A missing book is reported as HTTP 404; any error raised by the
database driver is reported as HTTP 500 with the driver's message.
"""

import logging
import sqlite3
from typing import List

from fastapi import APIRouter, HTTPException, status

from bookshelf_api.app.schemas.book import BookCreate, BookRead
from bookshelf_api.app.services.book_service import BookNotFoundError, BookService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[BookRead])
async def list_books() -> List[BookRead]:
    """Return all books.  An empty table yields an empty list."""
    try:
        return await BookService.list_books()
    except sqlite3.Error as e:
        logger.error("Failed to list books: %s", e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e


@router.get("/{book_id}", response_model=BookRead)
async def get_book(book_id: str) -> BookRead:
    """Retrieve a single book by its ID.

    The identifier is taken verbatim from the path; a value that
    matches no row (numeric or not) yields 404.
    """
    try:
        return await BookService.get_book(book_id)
    except BookNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except sqlite3.Error as e:
        logger.error("Failed to fetch book %s: %s", book_id, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e


@router.post("", response_model=BookRead, status_code=status.HTTP_201_CREATED)
async def create_book(book: BookCreate) -> BookRead:
    """Create a new book.

    The ``id`` is assigned by the database; one supplied in the body
    is ignored.
    """
    try:
        return await BookService.add_book(book)
    except sqlite3.Error as e:
        logger.error("Failed to create book '%s': %s", book.title, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)) from e
