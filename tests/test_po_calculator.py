"""
PO calculator tests: size parsing, weight, coercion, rounding, GST.

No database; the calculator is pure math.
"""

import pytest

from backend.po_calculator import (
    calculate_po, parse_size, weight_per_piece, coerce_number, round2,
    RoundShape, RectShape, UnknownShape, ValidationError, DERIVED_FIELDS,
)


# ============================================================
# Size parsing
# ============================================================

def test_parse_round_tube():
    shape = parse_size("373ODx4.5mm")
    assert shape == RoundShape(outer_diameter=373.0, thickness=4.5)
    assert shape.kind == "round"


def test_parse_round_tube_lowercase():
    assert parse_size("219odx6") == RoundShape(outer_diameter=219.0, thickness=6.0)


def test_parse_square_tube():
    shape = parse_size("400x400x12mm")
    assert shape == RectShape(length=400.0, breadth=400.0, thickness=12.0)
    assert shape.kind == "rect"


def test_parse_rectangular_tube_uppercase_x():
    assert parse_size("600X300X12MM") == RectShape(length=600.0, breadth=300.0, thickness=12.0)


def test_parse_od_without_digits_is_unknown():
    """'odd-shape' contains 'od' so it's read as round and fails to match."""
    shape = parse_size("odd-shape")
    assert isinstance(shape, UnknownShape)
    assert shape.kind == "unknown"
    assert shape.raw == "odd-shape"


def test_parse_two_dimensions_rect_is_unknown():
    assert isinstance(parse_size("400x400"), UnknownShape)


def test_od_string_never_falls_back_to_rect_pattern():
    """Contains 'od' but also a valid AxBxC; round branch wins, no match."""
    assert isinstance(parse_size("od 400x400x12"), UnknownShape)


# ============================================================
# Weight
# ============================================================

def test_round_weight_formula():
    assert weight_per_piece(RoundShape(373, 4.5)) == pytest.approx(373 * 4.5 / 6.8)


def test_rect_weight_formula():
    assert weight_per_piece(RectShape(600, 300, 12)) == pytest.approx(900 * 12 / 10.8)


def test_unknown_weight_is_zero_and_logged(caplog):
    with caplog.at_level("WARNING", logger="backend.po_calculator"):
        assert weight_per_piece(UnknownShape("mystery")) == 0.0
    assert "mystery" in caplog.text


# ============================================================
# Coercion + rounding
# ============================================================

@pytest.mark.parametrize("value, expected", [
    (None, 0.0),
    ("", 0.0),
    ("   ", 0.0),
    ("abc", 0.0),
    ("nan", 0.0),
    ("inf", 0.0),
    ([1, 2], 0.0),
    ("12", 12.0),
    (" 7.5 ", 7.5),
    (3, 3.0),
    (True, 1.0),
])
def test_coerce_number(value, expected):
    assert coerce_number(value) == expected


def test_coerce_number_custom_default():
    assert coerce_number("n/a", default=1.0) == 1.0


@pytest.mark.parametrize("value, expected", [
    (246.83823529, 246.84),
    (888.88888888, 888.89),
    (0.125, 0.13),
    (-0.125, -0.13),
    (2.5, 2.5),
    (0.0, 0.0),
])
def test_round2_half_away_from_zero(value, expected):
    assert round2(value) == expected


# ============================================================
# calculate_po
# ============================================================

def test_round_tube_po():
    result = calculate_po({"size": "373ODx4.5mm", "quantity": 10, "rate": 100})
    assert result["weight_per_pc"] == 246.84
    # unrounded per-piece weight × qty, then rounded
    assert result["total_weight"] == 2468.38
    assert result["price"] == 1000
    assert result["gst_18"] == 180
    assert result["total_price"] == 1180


def test_square_tube_po():
    result = calculate_po({"size": "400x400x12mm", "quantity": 5, "rate": 200})
    assert result["weight_per_pc"] == 888.89
    assert result["total_weight"] == 4444.44
    assert result["price"] == 1000
    assert result["gst_18"] == 180
    assert result["total_price"] == 1180


def test_unmatched_size_gives_zero_weight_but_keeps_price():
    result = calculate_po({"size": "odd-shape", "quantity": 2, "rate": 50})
    assert result["weight_per_pc"] == 0
    assert result["total_weight"] == 0
    assert result["price"] == 100
    assert result["total_price"] == 118


def test_non_numeric_quantity_and_rate_are_zero():
    result = calculate_po({"size": "400x400x12mm", "quantity": "abc", "rate": "abc"})
    assert result["price"] == 0
    assert result["gst_18"] == 0
    assert result["total_price"] == 0
    assert result["total_weight"] == 0
    assert result["weight_per_pc"] == 888.89


def test_missing_quantity_and_rate_are_zero():
    result = calculate_po({"size": "373ODx4.5mm"})
    assert result["price"] == 0
    assert result["total_weight"] == 0


def test_numeric_strings_are_accepted():
    result = calculate_po({"size": "400x400x12mm", "quantity": "5", "rate": "200.0"})
    assert result["price"] == 1000


@pytest.mark.parametrize("po", [
    {},
    {"size": None},
    {"size": ""},
    {"size": 0},
    {"size": False},
    {"quantity": 10, "rate": 100},
])
def test_missing_size_raises(po):
    with pytest.raises(ValidationError, match="Size is required"):
        calculate_po(po)


def test_validation_error_is_a_value_error():
    assert issubclass(ValidationError, ValueError)


def test_pass_through_fields_untouched():
    po = {"size": "400x400x12mm", "quantity": "abc", "rate": 200,
          "po_number": "SS-9", "customer_name": "Mehta Infra", "extra": {"a": 1}}
    result = calculate_po(po)
    assert result["po_number"] == "SS-9"
    assert result["customer_name"] == "Mehta Infra"
    assert result["extra"] == {"a": 1}
    # quantity passes through raw; only the derived fields use the coerced value
    assert result["quantity"] == "abc"


def test_input_not_mutated():
    po = {"size": "373ODx4.5mm", "quantity": 10, "rate": 100}
    calculate_po(po)
    assert po == {"size": "373ODx4.5mm", "quantity": 10, "rate": 100}


def test_same_input_same_output():
    po = {"size": "600x300x12mm", "quantity": 7, "rate": 333.33}
    assert calculate_po(po) == calculate_po(po)


def test_derived_fields_have_two_decimals():
    result = calculate_po({"size": "373ODx4.5mm", "quantity": 3, "rate": 99.999})
    for field in DERIVED_FIELDS:
        value = result[field]
        assert round(value, 2) == value, f"{field}={value}"


def test_derived_fields_overwrite_caller_values():
    """A client can't smuggle in its own price."""
    result = calculate_po({"size": "400x400x12mm", "quantity": 5, "rate": 200,
                           "price": 1, "total_price": 1})
    assert result["price"] == 1000
    assert result["total_price"] == 1180


def test_whitespace_size_is_priced_with_zero_weight(caplog):
    """Blank-looking but present size is a bad size, not a missing one."""
    with caplog.at_level("WARNING", logger="backend.po_calculator"):
        result = calculate_po({"size": "   ", "quantity": 2, "rate": 50})
    assert result["weight_per_pc"] == 0
    assert result["total_weight"] == 0
    assert result["price"] == 100
    assert result["total_price"] == 118
    assert "Unrecognised size" in caplog.text


# ============================================================
# Overflow
# ============================================================

def test_round2_non_finite_is_zero():
    assert round2(float("inf")) == 0.0
    assert round2(float("-inf")) == 0.0
    assert round2(float("nan")) == 0.0


def test_round2_huge_finite_value_unchanged():
    assert round2(1e307) == 1e307


def test_huge_quantity_and_rate_degrade_to_zero():
    result = calculate_po({"size": "400x400x12mm", "quantity": "1e200", "rate": "1e200"})
    assert result["price"] == 0
    assert result["gst_18"] == 0
    assert result["total_price"] == 0
    assert result["weight_per_pc"] == 888.89
    # 888.88... * 1e200 is still finite
    assert result["total_weight"] > 0


def test_huge_dimensions_degrade_to_zero():
    result = calculate_po({"size": "9" * 400 + "x1x1", "quantity": 0, "rate": 10})
    assert result["weight_per_pc"] == 0
    # inf * 0 is NaN
    assert result["total_weight"] == 0
    assert result["price"] == 0
