from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Annotated

from paginator.constants import FIRST_PAGE_NUMBER


class PageWindow(BaseModel):  # type: ignore[misc]
    """Result of a scrolling style: the displayed pages plus neighbours."""

    model_config = ConfigDict(frozen=True)

    pages_in_range: dict[int, int] = Field(default_factory=dict)
    previous: Annotated[int, Field(ge=1)] | None = None
    next: Annotated[int, Field(ge=1)] | None = None

    @classmethod
    def from_bounds(
        cls,
        lower_bound: int,
        upper_bound: int,
        current_page: int,
        page_count: int,
    ) -> "PageWindow":
        """
        Build a window from inclusive page bounds.

        Both bounds are clamped into [1, page_count] first, so strategies
        may compute bounds that overshoot either end. With no pages the
        window is empty.
        """
        pages_in_range: dict[int, int] = {}
        if page_count > 0:
            lower_bound = min(max(lower_bound, FIRST_PAGE_NUMBER), page_count)
            upper_bound = min(max(upper_bound, FIRST_PAGE_NUMBER), page_count)
            pages_in_range = {
                page: page for page in range(lower_bound, upper_bound + 1)
            }

        return cls(
            pages_in_range=pages_in_range,
            previous=current_page - 1 if current_page > FIRST_PAGE_NUMBER else None,
            next=current_page + 1 if current_page < page_count else None,
        )


class Pages(BaseModel):  # type: ignore[misc]
    """Everything a pager control needs to render the current position."""

    model_config = ConfigDict(frozen=True)

    page_count: Annotated[int, Field(ge=0)]
    item_count_per_page: Annotated[int, Field(ge=0)]
    total_item_count: Annotated[int, Field(ge=0)]
    current: Annotated[int, Field(ge=1)]
    first: Annotated[int, Field(ge=1)] | None = None
    last: Annotated[int, Field(ge=0)]
    previous: Annotated[int, Field(ge=1)] | None = None
    next: Annotated[int, Field(ge=1)] | None = None
    pages_in_range: dict[int, int] = Field(default_factory=dict)
    first_page_in_range: int | None = None
    last_page_in_range: int | None = None
    current_item_count: Annotated[int, Field(ge=0)] = 0
    first_item_number: int | None = None
    last_item_number: int | None = None
