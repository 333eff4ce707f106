"""
PO calculator: weight, price and GST for a steel tube order line.

Pure Python math. No database, no I/O.
Input: raw PO fields as posted by the office (size, quantity, rate, ...).
Output: the same fields plus weight_per_pc, total_weight, price, gst_18, total_price.

Size strings come in two families:
    Round tube:        "373ODx4.5mm"   -> OD 373, wall 4.5
    Square/rectangle:  "400x400x12mm"  -> 400 x 400, wall 12

Weight factors are the shop's rule-of-thumb divisors, not density math:
    round:  OD * thickness / 6.8
    rect:   (length + breadth) * thickness / 10.8
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Mapping, Union

logger = logging.getLogger(__name__)

GST_RATE = 0.18
ROUND_WEIGHT_DIVISOR = 6.8
RECT_WEIGHT_DIVISOR = 10.8

_NUM = r"(\d+(?:\.\d+)?)"
ROUND_PATTERN = re.compile(_NUM + r"odx" + _NUM, re.IGNORECASE)
RECT_PATTERN = re.compile(_NUM + r"x" + _NUM + r"x" + _NUM, re.IGNORECASE)

DERIVED_FIELDS = ("weight_per_pc", "total_weight", "price", "gst_18", "total_price")


class ValidationError(ValueError):
    """Raised when a PO cannot be priced at all (missing size)."""


# --- Shapes ---

@dataclass(frozen=True)
class RoundShape:
    outer_diameter: float
    thickness: float
    kind: str = "round"


@dataclass(frozen=True)
class RectShape:
    length: float
    breadth: float
    thickness: float
    kind: str = "rect"


@dataclass(frozen=True)
class UnknownShape:
    raw: str
    kind: str = "unknown"


Shape = Union[RoundShape, RectShape, UnknownShape]


def parse_size(size: str) -> Shape:
    """
    Work out the tube cross-section from a size string.

    Anything containing "od" (any case) is treated as a round tube; everything
    else as square/rectangular. A string that doesn't fit its family's pattern
    comes back as UnknownShape rather than raising.
    """
    if "od" in size.lower():
        match = ROUND_PATTERN.search(size)
        if match:
            return RoundShape(
                outer_diameter=float(match.group(1)),
                thickness=float(match.group(2)),
            )
    else:
        match = RECT_PATTERN.search(size)
        if match:
            return RectShape(
                length=float(match.group(1)),
                breadth=float(match.group(2)),
                thickness=float(match.group(3)),
            )
    return UnknownShape(raw=size)


def weight_per_piece(shape: Shape) -> float:
    """Unrounded weight of one piece. Unknown shapes weigh 0."""
    if isinstance(shape, RoundShape):
        return (shape.outer_diameter * shape.thickness) / ROUND_WEIGHT_DIVISOR
    if isinstance(shape, RectShape):
        return (shape.length + shape.breadth) * shape.thickness / RECT_WEIGHT_DIVISOR
    logger.warning("Unrecognised size %r, weight defaults to 0", shape.raw)
    return 0.0


# --- Numeric helpers ---

def coerce_number(value, default: float = 0.0) -> float:
    """
    Loose numeric coercion for quantity/rate.

    None, blank or non-numeric strings, NaN/inf and anything float() rejects
    all become `default`. Booleans count as 1/0.
    """
    if value is None:
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        number = float(value)
    except (ValueError, TypeError):
        return default
    if not math.isfinite(number):
        return default
    return number


def round2(value: float) -> float:
    """Round to 2 decimals, halves away from zero (12.345 -> 12.35, not banker's).

    Overflowed results (inf/NaN from huge quantities, rates or dimensions)
    come back as 0 with a warning.
    """
    if not math.isfinite(value):
        logger.warning("Non-finite amount %r, defaulting to 0", value)
        return 0.0
    scaled = value * 100
    if not math.isfinite(scaled):
        return value  # already far beyond 2-decimal precision
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / 100


# --- Main entry point ---

def calculate_po(po_data: Mapping) -> dict:
    """
    Price a PO line.

    Returns a new dict with every key of `po_data` plus the derived fields.
    `po_data` itself is not modified. Raises ValidationError if size is
    missing or empty.
    """
    size = po_data.get("size")
    if not size:
        raise ValidationError("Size is required")

    shape = parse_size(str(size))
    weight = weight_per_piece(shape)

    qty = coerce_number(po_data.get("quantity"))
    rate = coerce_number(po_data.get("rate"))
    price = qty * rate
    gst_18 = price * GST_RATE
    total_price = price + gst_18

    return {
        **po_data,
        "weight_per_pc": round2(weight),
        "total_weight": round2(weight * qty),
        "price": round2(price),
        "gst_18": round2(gst_18),
        "total_price": round2(total_price),
    }
