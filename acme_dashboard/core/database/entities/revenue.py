"""
Revenue entity models.

One row per month, keyed by the month label (e.g. ``Jan``).
"""

from __future__ import annotations

from sqlmodel import Field

from ..base import Base


class Revenue(Base, table=True):
    """Monthly revenue figure.

    Table: revenue
    """

    __tablename__ = "revenue"

    month: str = Field(primary_key=True, max_length=4)
    revenue: int = Field()

    def __repr__(self) -> str:
        return f"Revenue(month={self.month}, revenue={self.revenue})"
