"""
Service layer for books.

All queries use parameterized statements and run on the shared
connection from ``core.db``.  Driver errors are not caught here, and rows
that do not map onto ``BookRead`` surface as ``sqlite3.DataError``; the
API layer turns them into HTTP 500 responses.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List

from pydantic import ValidationError

from bookshelf_api.app.core.db import get_connection
from bookshelf_api.app.schemas.book import BookCreate, BookRead

logger = logging.getLogger(__name__)


class BookNotFoundError(LookupError):
    """Raised when no book matches the requested identifier."""

    def __init__(self, message: str = "Book not found") -> None:
        super().__init__(message)


class BookService:
    """Service class for reading and inserting books."""

    @classmethod
    async def list_books(cls) -> List[BookRead]:
        """Return every book in the table, possibly an empty list."""
        cursor = get_connection().cursor()
        try:
            rows = cursor.execute("SELECT id, title, author, price FROM Books").fetchall()
            return [cls._row_to_book_read(row) for row in rows]
        finally:
            cursor.close()

    @classmethod
    async def get_book(cls, book_id: str) -> BookRead:
        """Retrieve a single book by its identifier.

        The identifier is bound as given.  SQLite compares it against
        the integer key with numeric affinity, so ``"7"`` finds book 7
        while a non‑numeric value simply matches nothing.
        """
        cursor = get_connection().cursor()
        try:
            row = cursor.execute(
                "SELECT id, title, author, price FROM Books WHERE id = ?",
                (book_id,),
            ).fetchone()
        finally:
            cursor.close()
        if row is None:
            raise BookNotFoundError()
        return cls._row_to_book_read(row)

    @classmethod
    async def add_book(cls, data: BookCreate) -> BookRead:
        """Insert a new book and return it with its assigned identifier."""
        conn = get_connection()
        cursor = conn.cursor()
        try:
            cursor.execute(
                "INSERT INTO Books (title, author, price) VALUES (?, ?, ?)",
                (data.title, data.author, data.price),
            )
            book_id = cursor.lastrowid
            conn.commit()
        finally:
            cursor.close()
        logger.info("Created book %s", book_id)
        return BookRead(id=book_id, **data.model_dump())

    @staticmethod
    def _row_to_book_read(row: sqlite3.Row) -> BookRead:
        """Convert a database row to a BookRead schema instance.

        A row that does not fit the schema (a NULL column in an externally
        created table, a non-finite price) raises ``sqlite3.DataError`` so
        it is reported like any other store error.
        """
        try:
            return BookRead(
                id=row["id"],
                title=row["title"],
                author=row["author"],
                price=row["price"],
            )
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise sqlite3.DataError(f"invalid Books row {row['id']}: {problems}") from e
