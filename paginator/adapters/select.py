"""
Select adapter for SQLModel/SQLAlchemy queries.

Runs a ``Select`` through a synchronous SQLModel session using
OFFSET/LIMIT for pages and a wrapped COUNT(*) for the total.
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select
from sqlmodel import Session, func, select

from paginator.adapters.validation import validate_slice
from paginator.logging import logger

T = TypeVar("T")


class SelectAdapter(Generic[T]):
    """
    Adapter for database queries.

    The total is counted once per adapter instance and cached, so the
    paginator's repeated ``count()`` calls cost a single COUNT query.

    Example:
        ```python
        from sqlmodel import Session, select

        with Session(engine) as session:
            query = select(Author).where(Author.name.ilike("%John%"))
            paginator = Paginator(SelectAdapter(session, query))
            paginator.set_current_page_number(2)
            authors = paginator.get_current_items()
        ```
    """

    def __init__(
        self,
        session: Session,
        query: Select[Any],
        count_query: Select[Any] | None = None,
    ):
        """
        Initialize select adapter.

        Args:
            session: SQLModel session used for both queries.
            query: Select query with filters and ordering already applied.
            count_query: Optional query returning the total as a single
                scalar. Defaults to ``SELECT count(*) FROM (query)``.
        """
        self.session = session
        self.query = query
        self.count_query = count_query
        self._count: int | None = None

    def _build_count_query(self) -> Select[Any]:
        # Ordering does not change the count
        subquery = self.query.order_by(None).subquery()
        return select(func.count()).select_from(subquery)

    def count(self) -> int:
        """
        Count rows matched by the query.

        Returns:
            Total row count, cached after the first call.

        Raises:
            SQLAlchemyError: If the database query fails.
        """
        if self._count is None:
            count_query = self.count_query
            if count_query is None:
                count_query = self._build_count_query()
            self._count = self.session.exec(count_query).one()
            logger.debug(f"Counted {self._count} rows for select adapter")

        return self._count

    def get_items(self, offset: int, length: int) -> Sequence[T]:
        """
        Fetch one slice of the query.

        Args:
            offset: Number of rows to skip.
            length: Maximum number of rows to return.

        Returns:
            Rows in the slice.

        Raises:
            OutOfRangeError: If offset is negative.
            SQLAlchemyError: If the database query fails.
        """
        validate_slice(offset, length)
        data_query = self.query.offset(offset).limit(length)
        return self.session.exec(data_query).all()
