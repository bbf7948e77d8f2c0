"""Pagination metadata and the base model for paginated responses."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class Pagination(BaseModel):
    """Positional metadata reported with every page.

    Attributes:
        page: One-based page index
        per_page: Page size the server applied
        count: Number of items in this page
        total_count: Total number of items, when the endpoint reports it
        offset: Number of items before this page
    """

    page: int = Field(..., ge=1)
    per_page: int = Field(..., gt=0)
    count: int = Field(..., ge=0)
    total_count: int | None = Field(default=None, ge=0)
    offset: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)

    def is_consistent(self) -> bool:
        """Whether count fits the page size and the page fits the total."""
        if self.count > self.per_page:
            return False
        if self.total_count is not None and self.offset + self.count > self.total_count:
            return False
        return True

    def is_last_page(self, received: int, items_per_page: int) -> bool:
        """Whether no further pages should be requested after this one.

        Args:
            received: Number of items actually decoded from the page
            items_per_page: Page size that was requested

        Returns:
            True if the page reaches total_count, or, when total_count is
            unknown, if the page came back short
        """
        if self.total_count is not None:
            return self.offset + self.count >= self.total_count
        return received < items_per_page


class Page(BaseModel):
    """Base model for a paginated response body.

    The API flattens the pagination fields into the top level of the body
    next to the item list. Subclasses declare the item list field and name it
    in ``items_field``.
    """

    items_field: ClassVar[str] = "items"

    page: int = Field(..., ge=1)
    per_page: int = Field(..., gt=0)
    count: int = Field(..., ge=0)
    total_count: int | None = Field(default=None, ge=0)
    offset: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def pagination(self) -> Pagination:
        """Pagination metadata of this page."""
        return Pagination(
            page=self.page,
            per_page=self.per_page,
            count=self.count,
            total_count=self.total_count,
            offset=self.offset,
        )

    def items(self) -> list[Any]:
        """Items of this page in the order the API returned them."""
        return list(getattr(self, self.items_field))
