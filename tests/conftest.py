"""
Pytest configuration and fixtures for testing.

This module provides shared paginator fixtures and an in-memory SQLite
session for the select adapter.
"""

from typing import Iterator

import pytest
from sqlmodel import Field, Session, SQLModel, create_engine

from paginator import ArrayAdapter, Paginator


class Book(SQLModel, table=True):
    """Test model for select adapter tests."""

    __tablename__ = "test_paginator_book"

    id: int | None = Field(default=None, primary_key=True)
    title: str
    year: int


@pytest.fixture
def array_paginator() -> Paginator[int]:
    """
    Provides a paginator over 101 integers.

    With 10 items per page and a page range of 10 this yields 11 pages,
    the last of which holds a single item.
    """
    paginator = Paginator(ArrayAdapter(list(range(1, 102))))
    paginator.set_item_count_per_page(10)
    paginator.set_page_range(10)
    return paginator


@pytest.fixture
def empty_paginator() -> Paginator[int]:
    """Provides a paginator over an empty collection."""
    return Paginator(ArrayAdapter([]), item_count_per_page=10)


@pytest.fixture
def session() -> Iterator[Session]:
    """
    Provides a SQLModel session on an in-memory SQLite database.

    The database holds 25 books with ids 1..25; odd ids were published
    after 2000.
    """
    engine = create_engine("sqlite://")
    SQLModel.metadata.create_all(engine)

    with Session(engine) as s:
        for i in range(1, 26):
            s.add(Book(title=f"Book {i}", year=2000 + i if i % 2 else 1990))
        s.commit()
        yield s

    engine.dispose()


@pytest.fixture
def book_model() -> type[Book]:
    """Provides the Book table model."""
    return Book
