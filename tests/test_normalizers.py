"""
Tests for field normalizers.

Each field accepts a specific set of raw shapes and produces one canonical
form; anything else is rejected with None.
"""

import pytest
from typescale.model import OptionField, StepField
from typescale.normalizers import (
    OPTION_NORMALIZERS,
    STEP_NORMALIZERS,
    format_number,
    normalize_base_font_size,
    normalize_letter_spacing,
    normalize_line_height,
    normalize_option,
    normalize_prefix,
    normalize_preset,
    normalize_rounded,
    normalize_scale,
    normalize_step_field,
    normalize_step_font_size,
    parse_float,
    round_half_up,
)


class TestScale:
    """scale accepts numbers only."""

    def test_number(self):
        assert normalize_scale(1.2) == 1.2
        assert normalize_scale(2) == 2.0

    def test_numeric_string_not_coerced(self):
        assert normalize_scale("1.2") is None

    def test_bool_rejected(self):
        assert normalize_scale(True) is None

    def test_int_too_large_for_float_rejected(self):
        assert normalize_scale(10 ** 400) is None


class TestBaseFontSize:
    """Plugin-level fontSize resolves to px."""

    def test_number_is_px(self):
        assert normalize_base_font_size(18) == 18.0

    def test_unitless_string(self):
        assert normalize_base_font_size(" 20 ") == 20.0

    def test_px(self):
        assert normalize_base_font_size("16px") == 16.0

    def test_rem_and_em_use_base_size(self):
        assert normalize_base_font_size("1.5rem") == 24.0
        assert normalize_base_font_size("1.2EM") == pytest.approx(19.2)

    def test_int_too_large_for_float_rejected(self):
        assert normalize_base_font_size(10 ** 400) is None

    @pytest.mark.parametrize("raw", ["12pt", "abc", "", "-16px", None, [16]])
    def test_rejected(self, raw):
        assert normalize_base_font_size(raw) is None


class TestStepFontSize:
    """Per-step fontSize is packaged, not validated."""

    def test_number_becomes_px(self):
        assert normalize_step_font_size(24) == "24px"
        assert normalize_step_font_size(13.5) == "13.5px"

    def test_string_trimmed(self):
        assert normalize_step_font_size("  2rem ") == "2rem"

    def test_any_string_passes(self):
        assert normalize_step_font_size("clamp(1rem, 2vw, 3rem)") == "clamp(1rem, 2vw, 3rem)"

    def test_non_string_rejected(self):
        assert normalize_step_font_size(None) is None


class TestLineHeight:
    """lineHeight keeps units; numbers become ratios."""

    def test_number(self):
        assert normalize_line_height(1.5) == "1.5"
        assert normalize_line_height(2) == "2"
        assert normalize_line_height(2.0) == "2"

    def test_string_keeps_unit(self):
        assert normalize_line_height(" 24px ") == "24px"
        assert normalize_line_height("1.4rem") == "1.4rem"

    def test_blank_rejected(self):
        assert normalize_line_height("   ") is None

    def test_other_types_rejected(self):
        assert normalize_line_height([1.5]) is None


class TestLetterSpacing:
    """letterSpacing accepts strings only."""

    def test_string_trimmed(self):
        assert normalize_letter_spacing(" 0.01em ") == "0.01em"

    def test_number_rejected(self):
        assert normalize_letter_spacing(0.1) is None


class TestPrefix:
    """prefix is stripped to an identifier, never rejected for content."""

    def test_quotes_stripped(self):
        assert normalize_prefix('"custom-text"') == "custom-text"

    def test_invalid_characters_stripped(self):
        assert normalize_prefix("my prefix!") == "myprefix"

    def test_can_reduce_to_empty(self):
        assert normalize_prefix("!!!") == ""

    def test_non_string_rejected(self):
        assert normalize_prefix(5) is None


class TestRounded:
    """rounded must already be a bool."""

    def test_bool(self):
        assert normalize_rounded(True) is True
        assert normalize_rounded(False) is False

    def test_string_not_coerced(self):
        assert normalize_rounded("true") is None

    def test_int_not_coerced(self):
        assert normalize_rounded(1) is None


class TestParseFloat:
    """step and stepOffset parse numeric strings."""

    def test_numbers(self):
        assert parse_float(2) == 2.0
        assert parse_float(-0.5) == -0.5

    def test_strings(self):
        assert parse_float("-1") == -1.0
        assert parse_float(" 2.5 ") == 2.5

    @pytest.mark.parametrize("raw", ["abc", "nan", "inf", "", True, None, 10 ** 400])
    def test_rejected(self, raw):
        assert parse_float(raw) is None


class TestPreset:
    """preset names are quote-stripped and lowercased."""

    def test_quotes_and_case(self):
        assert normalize_preset("'Tailwind'") == "tailwind"
        assert normalize_preset('"default"') == "default"

    def test_unknown_name_passes_through(self):
        assert normalize_preset("custom") == "custom"

    def test_rejected(self):
        assert normalize_preset(3) is None
        assert normalize_preset("  ") is None


class TestNumberHelpers:
    """Rounding and formatting used for generated sizes."""

    def test_round_half_up_on_exact_tie(self):
        """0.8125 is exactly representable; the tie rounds up."""
        assert round_half_up(0.8125, 3) == 0.813
        assert round_half_up(1.1875, 3) == 1.188

    def test_round_half_up_binary_noise(self):
        assert round_half_up(16 * 1.2, 2) == 19.2

    def test_round_half_up_beyond_default_decimal_precision(self):
        assert round_half_up(2.0 ** 104, 2) == 2.0 ** 104
        assert round_half_up(1e300, 3) == 1e300

    def test_format_number(self):
        assert format_number(13.0) == "13"
        assert format_number(0.813) == "0.813"
        assert format_number(5) == "5"
        assert format_number(19.2) == "19.2"


class TestDispatch:
    """Dispatch tables cover every field."""

    def test_every_option_field_has_a_normalizer(self):
        assert set(OPTION_NORMALIZERS) == set(OptionField)

    def test_every_step_field_has_a_normalizer(self):
        assert set(STEP_NORMALIZERS) == set(StepField)

    def test_huge_ints_rejected_for_numeric_fields(self):
        assert normalize_option(OptionField.STEP_OFFSET, 10 ** 400) is None
        assert normalize_step_field(StepField.STEP, 10 ** 400) is None

    def test_shared_names_normalize_differently(self):
        """fontSize is numeric px for options but a length string for steps."""
        assert normalize_option(OptionField.FONT_SIZE, 24) == 24.0
        assert normalize_step_field(StepField.FONT_SIZE, 24) == "24px"
