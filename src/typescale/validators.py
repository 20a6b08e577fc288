"""
Validators for canonical values.

Pure predicates. They check that an already-normalized value satisfies
the domain constraints of its field: positive finite numbers, CSS length
syntax, and the handful of keywords each property accepts.
"""

import math
import re
from typing import Any, Callable, Dict

from typescale.model import OptionField, StepField


CSS_UNITS = ["px", "em", "rem", "ex", "ch", "vw", "vh", "vmin", "vmax", "%"]
FONT_SIZE_KEYWORDS = {
    "xx-small", "x-small", "small", "medium", "large", "x-large", "xx-large",
    "xxx-large", "smaller", "larger", "inherit", "initial", "unset",
}

_CSS_LENGTH_RE = re.compile(
    r"^[-+]?(\d*\.?\d+)(" + "|".join(re.escape(u) for u in CSS_UNITS) + r")$",
    re.IGNORECASE,
)
_CSS_FUNCTION_RE = re.compile(r"^(calc|clamp|min|max|var)\(.*\)$", re.IGNORECASE | re.DOTALL)


def is_numeric(value: Any) -> bool:
    """True for finite numbers and strings that parse as one."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        try:
            return math.isfinite(value)
        except OverflowError:
            return False
    if isinstance(value, str):
        try:
            return math.isfinite(float(value.strip()))
        except ValueError:
            return False
    return False


def is_positive_number(value: Any) -> bool:
    return is_numeric(value) and float(value) > 0


def is_css_length(value: str) -> bool:
    """'1.5rem', '-0.01em', '24px', '80%'. Unitless numbers are not lengths."""
    return bool(_CSS_LENGTH_RE.match(value.strip()))


def is_css_function(value: str) -> bool:
    return bool(_CSS_FUNCTION_RE.match(value.strip()))


def is_valid_font_size(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    text = value.strip().lower()
    return is_css_length(text) or text in FONT_SIZE_KEYWORDS or is_css_function(text)


def is_valid_line_height(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    text = value.strip().lower()
    return (
        is_numeric(text)
        or is_css_length(text)
        or text == "normal"
        or is_css_function(text)
    )


def is_valid_letter_spacing(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    text = value.strip().lower()
    return is_css_length(text) or text == "normal" or text == "0" or is_css_function(text)


OPTION_VALIDATORS: Dict[OptionField, Callable[[Any], bool]] = {
    OptionField.SCALE: is_positive_number,
    OptionField.FONT_SIZE: is_positive_number,
    OptionField.LINE_HEIGHT: is_valid_line_height,
    OptionField.STEP_OFFSET: is_numeric,
}

# Checked where generated values are consumed; failures are reported, not dropped.
STEP_VALIDATORS: Dict[StepField, Callable[[Any], bool]] = {
    StepField.FONT_SIZE: is_valid_font_size,
    StepField.LINE_HEIGHT: is_valid_line_height,
    StepField.LETTER_SPACING: is_valid_letter_spacing,
}


def validate_option(field: OptionField, value: Any) -> bool:
    """Fields without a rule (prefix, rounded, preset) are valid once normalized."""
    rule = OPTION_VALIDATORS.get(field)
    return rule is None or rule(value)
