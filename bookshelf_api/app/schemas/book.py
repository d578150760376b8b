"""
Pydantic models for book data.

``BookCreate`` is the request body accepted by ``POST /books``; fields
that are missing bind to their zero values, values of the wrong JSON
type are rejected and an ``id`` sent by the client is ignored.
``BookRead`` adds the identifier assigned by the database and is used
for every response.
"""

from pydantic import BaseModel, Field


class BookCreate(BaseModel):
    """Schema for creating a book.

    Validation is strict: a JSON string is not accepted for ``price``
    (integers are), and non-finite values such as ``NaN`` or an
    overflowing ``1e400`` are rejected.
    """

    title: str = Field("", examples=["The Go Programming Language"])
    author: str = Field("", examples=["Alan A. A. Donovan"])
    price: float = Field(0.0, allow_inf_nan=False, examples=[39.99])

    model_config = {
        "strict": True,
    }


class BookRead(BaseModel):
    """Schema for reading a book from the API."""

    id: int
    title: str
    author: str
    price: float = Field(allow_inf_nan=False)

    model_config = {
        "from_attributes": True,
    }
