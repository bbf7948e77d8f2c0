"""Fixtures for pagination engine tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from aoe4world.models import Pagination


@dataclass
class FakePage:
    """Minimal decoded page; items are (page, index) tuples."""

    pagination: Pagination
    values: list[Any] = field(default_factory=list)

    def items(self) -> list[Any]:
        return list(self.values)


@pytest.fixture
def make_page():
    """Factory for pages of a listing holding ``available`` items.

    ``total_count`` is reported unless ``report_total`` is False.
    """

    def make(page: int, *, per_page: int = 50, available: int = 10_000, report_total=True):
        offset = (page - 1) * per_page
        count = max(0, min(per_page, available - offset))
        meta = Pagination(
            page=page,
            per_page=per_page,
            count=count,
            total_count=available if report_total else None,
            offset=offset,
        )
        return FakePage(pagination=meta, values=[(page, i) for i in range(count)])

    return make
