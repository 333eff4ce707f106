"""
Aggregate reports over customer POs.

Plain functions over (key, value) row tuples so they can be tested without
a database. Routers do the querying.
"""

import logging
from datetime import date, datetime
from typing import Iterable, List, Optional, Tuple

from .po_calculator import round2

logger = logging.getLogger(__name__)

MONTH_FORMAT = "%b %Y"  # "Oct 2025"


def top_materials(rows: Iterable[Tuple[Optional[str], Optional[float]]]) -> List[dict]:
    """Total weight sold per size, heaviest first."""
    summary = {}
    for size, total_weight in rows:
        if size is None:
            continue
        summary[size] = summary.get(size, 0.0) + (total_weight or 0.0)

    # sorted() is stable: equal totals keep first-seen order
    ranked = sorted(summary.items(), key=lambda item: item[1], reverse=True)
    return [{"size": size, "total_weight": round2(weight)} for size, weight in ranked]


def _as_date(value) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(str(value)).date()
    except ValueError:
        return None


def month_label(value) -> Optional[str]:
    """'Oct 2025' for a date, datetime or ISO string. None if unparseable."""
    parsed = _as_date(value)
    return parsed.strftime(MONTH_FORMAT) if parsed else None


def monthly_sales(rows: Iterable[Tuple[object, Optional[float]]]) -> List[dict]:
    """Sum of total_price per calendar month, oldest month first."""
    totals = {}
    skipped = 0
    for po_date, total_price in rows:
        parsed = _as_date(po_date)
        if parsed is None:
            skipped += 1
            continue
        key = (parsed.year, parsed.month)
        totals[key] = totals.get(key, 0.0) + (total_price or 0.0)

    if skipped:
        logger.warning("monthly_sales: skipped %d PO(s) without a usable date", skipped)

    return [
        {"month": date(year, month, 1).strftime(MONTH_FORMAT), "total": round2(total)}
        for (year, month), total in sorted(totals.items())
    ]
