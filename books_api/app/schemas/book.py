"""
Pydantic schemas for books.

A book has a title, an author, a ``finished`` reading flag and a
creation timestamp.  On the wire the timestamp is called
``createdAt`` and is rendered as an ISO‑8601 UTC string with
millisecond precision, e.g. ``2020-03-10T04:05:06.157Z``.

Create and update payloads make every field optional: the API does not
reject a book without a title or an author, such records are stored
with ``null`` values.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class BookCreate(BaseModel):
    """Schema for creating a new book."""

    title: Optional[str] = Field(None, description="The title of your book")
    author: Optional[str] = Field(None, description="The book author")
    finished: Optional[bool] = Field(
        None, description="Whether you have finished reading the book; defaults to false"
    )


class BookUpdate(BaseModel):
    """Schema for updating an existing book.

    All fields are optional; only fields present in the payload are
    applied, so ``{"title": null}`` clears the title while ``{}`` changes
    nothing.
    """

    title: Optional[str] = None
    author: Optional[str] = None
    finished: Optional[bool] = None


class Book(BaseModel):
    """A stored book.

    Instances are immutable; an update produces a new ``Book``.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "The New Turing Omnibus",
                "author": "Alexander K. Dewdney",
                "finished": False,
                "createdAt": "2020-03-10T04:05:06.157Z",
            }
        },
    )

    id: int = Field(..., description="The auto-generated id of the book")
    title: Optional[str] = Field(None, description="The title of your book")
    author: Optional[str] = Field(None, description="The book author")
    finished: bool = Field(False, description="Whether you have finished reading the book")
    created_at: datetime = Field(..., alias="createdAt", description="The date the book was added")

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(timezone.utc)
        return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
