"""
Formatting helpers shared by the dashboard query functions and pages.

Amounts are stored in cents; everything user-facing is rendered in US dollars.
"""

from __future__ import annotations

import datetime as dt
import math
from typing import Iterable, List, Optional, Tuple, Union

PageItem = Union[int, str]

ELLIPSIS = "..."


def format_currency(amount: Optional[int]) -> str:
    """Render an amount in cents as a US dollar string.

    ``None`` (e.g. the SUM of an empty table) renders as ``$0.00``.

    Examples:
        >>> format_currency(15795)
        '$157.95'
        >>> format_currency(123456789)
        '$1,234,567.89'
    """
    cents = amount or 0
    sign = "-" if cents < 0 else ""
    return f"{sign}${abs(cents) / 100:,.2f}"


def format_date_to_local(value: Union[str, dt.date]) -> str:
    """Render a date the way the dashboard shows it, e.g. ``Dec 6, 2022``."""
    if isinstance(value, str):
        value = dt.date.fromisoformat(value[:10])
    return f"{value.strftime('%b')} {value.day}, {value.year}"


def generate_y_axis(revenue: Iterable[int]) -> Tuple[List[str], int]:
    """Build the revenue chart y-axis labels in $1K steps.

    Returns:
        ``(labels, top_label)`` where labels run from the top label down to ``$0K``.
    """
    highest = max(revenue, default=0)
    top_label = math.ceil(highest / 1000) * 1000
    labels = [f"${value // 1000}K" for value in range(top_label, -1, -1000)]
    return labels, top_label


def generate_pagination(current_page: int, total_pages: int) -> List[PageItem]:
    """Compute the page buttons for the invoices table.

    Up to seven pages are listed in full; beyond that the list collapses
    around the first, last and current pages with ``"..."`` gaps.
    """
    if total_pages <= 7:
        return list(range(1, total_pages + 1))

    if current_page <= 3:
        return [1, 2, 3, ELLIPSIS, total_pages - 1, total_pages]

    if current_page >= total_pages - 2:
        return [1, 2, ELLIPSIS, total_pages - 2, total_pages - 1, total_pages]

    return [1, ELLIPSIS, current_page - 1, current_page, current_page + 1, ELLIPSIS, total_pages]
