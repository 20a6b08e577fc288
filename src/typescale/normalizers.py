"""
Field normalizers (Layer 1: raw values -> canonical values).

One pure function per field. Each accepts a raw value in any of the
shapes that field allows and returns the canonical form, or None to
signal rejection. Normalizers never raise and never log; the resolvers
turn a rejection into a diagnostic.

Accepted shapes:
    scale          number only (strings are NOT coerced)
    fontSize       option: number (px) or "<n>", "<n>px", "<n>em", "<n>rem"
                   step:   number (-> "<n>px") or any string (trimmed)
    lineHeight     number (-> "<n>") or non-blank string (trimmed)
    letterSpacing  string only (trimmed)
    prefix         string, characters outside [A-Za-z0-9_-] stripped
    rounded        bool only
    step/stepOffset  number, or a string that parses as a float
    preset         string, quotes stripped, lowercased
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any, Callable, Dict, Optional

from typescale.model import BASE_FONT_SIZE, OptionField, StepField


_FONT_SIZE_RE = re.compile(r"^(\d*\.?\d+)(rem|em|px)?$")
_PREFIX_STRIP_RE = re.compile(r"[^A-Za-z0-9_-]")
_QUOTES = "\"'"


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a number here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def round_half_up(value: float, precision: int = 3) -> float:
    """
    Round to `precision` decimals, ties away from zero.

    Works on the exact binary value, so 0.8125 -> 0.813 and
    19.199999999999999 -> 19.2.
    """
    exact = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(28, exact.adjusted() + precision + 2)
        return float(exact.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP))


def _to_float(value: Any) -> Optional[float]:
    """float(value), or None for ints too large to represent."""
    try:
        return float(value)
    except OverflowError:
        return None


def format_number(value: float) -> str:
    """Shortest text for a number: 13.0 -> "13", 19.2 -> "19.2"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def parse_float(value: Any) -> Optional[float]:
    """Numbers pass through; strings are parsed. Non-finite results are rejected."""
    if _is_number(value):
        number = _to_float(value)
        if number is None:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


# =========================================================================
# OPTION NORMALIZERS
# =========================================================================

def normalize_scale(value: Any) -> Optional[float]:
    if _is_number(value):
        return _to_float(value)
    return None


def normalize_base_font_size(value: Any) -> Optional[float]:
    """Plugin-level font size in px. em/rem resolve against BASE_FONT_SIZE."""
    if _is_number(value):
        return _to_float(value)
    if not isinstance(value, str):
        return None

    match = _FONT_SIZE_RE.match(value.strip().lower())
    if not match:
        return None

    number = float(match.group(1))
    if match.group(2) in ("em", "rem"):
        return number * BASE_FONT_SIZE
    return number


def normalize_line_height(value: Any) -> Optional[str]:
    if _is_number(value):
        return format_number(value)
    if not isinstance(value, str):
        return None
    return value.strip() or None


def normalize_prefix(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    return _PREFIX_STRIP_RE.sub("", value)


def normalize_rounded(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    return None


def normalize_preset(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    name = value.strip().strip(_QUOTES).strip().lower()
    return name or None


# =========================================================================
# STEP NORMALIZERS
# =========================================================================

def normalize_step_font_size(value: Any) -> Optional[str]:
    if _is_number(value):
        return f"{format_number(value)}px"
    if not isinstance(value, str):
        return None
    return value.strip() or None


def normalize_letter_spacing(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    return value.strip() or None


# =========================================================================
# DISPATCH TABLES
# =========================================================================

OPTION_NORMALIZERS: Dict[OptionField, Callable[[Any], Any]] = {
    OptionField.SCALE: normalize_scale,
    OptionField.FONT_SIZE: normalize_base_font_size,
    OptionField.LINE_HEIGHT: normalize_line_height,
    OptionField.PREFIX: normalize_prefix,
    OptionField.ROUNDED: normalize_rounded,
    OptionField.STEP_OFFSET: parse_float,
    OptionField.PRESET: normalize_preset,
}

STEP_NORMALIZERS: Dict[StepField, Callable[[Any], Any]] = {
    StepField.STEP: parse_float,
    StepField.FONT_SIZE: normalize_step_font_size,
    StepField.LINE_HEIGHT: normalize_line_height,
    StepField.LETTER_SPACING: normalize_letter_spacing,
}


def normalize_option(field: OptionField, value: Any) -> Any:
    """Canonical value for an option field, or None if rejected."""
    return OPTION_NORMALIZERS[field](value)


def normalize_step_field(field: StepField, value: Any) -> Any:
    """Canonical value for a step field, or None if rejected."""
    return STEP_NORMALIZERS[field](value)
