"""
Top‑level router for the API.

This router aggregates domain‑specific routers.  When a new domain is
introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import books

router = APIRouter()

# The books router declares its paths relative to the prefix ("" and
# "/{book_id}") so the collection is served at ``/books`` itself.
router.include_router(books.router, prefix="/books", tags=["books"])
