"""
Core Typescale Model Objects

Defines the fundamental data structures of the type-scale engine.

These are pure data classes representing:
    - Field identifiers (closed enumerations of option and step fields)
    - Option bundles (fully resolved plugin-level options)
    - Step definitions (one named point on the scale, before generation)
    - Output entries (generated declaration values for one step)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about CSS documents, YAML files or call sites
        - Carry canonical values only (raw values live in the resolvers)
        - Are fully serializable
        - Represent structure, not behavior
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


# Root font size used for em/rem conversions, in px.
BASE_FONT_SIZE = 16

_SEPARATOR_RE = re.compile(r"[-_]+([A-Za-z0-9])")
_UPPER_RE = re.compile(r"([A-Z])")


def canonical_key(key: Any) -> Optional[str]:
    """
    Convert a raw field key to its camelCase identifier.

    Accepts camelCase, kebab-case and snake_case spellings:
        "font-size"   -> "fontSize"
        "step_offset" -> "stepOffset"
        "lineHeight"  -> "lineHeight"

    Returns None for keys that are not strings or are blank.
    """
    if not isinstance(key, str):
        return None
    key = key.strip()
    if not key:
        return None
    return _SEPARATOR_RE.sub(lambda m: m.group(1).upper(), key)


def _camel_to_snake(name: str) -> str:
    return _UPPER_RE.sub(lambda m: "_" + m.group(1).lower(), name)


def _camel_to_kebab(name: str) -> str:
    return _UPPER_RE.sub(lambda m: "-" + m.group(1).lower(), name)


class OptionField(Enum):
    """
    Plugin-level option fields.

    The value is the raw identifier accepted at the engine boundary.
    """

    SCALE = "scale"
    FONT_SIZE = "fontSize"
    LINE_HEIGHT = "lineHeight"
    PREFIX = "prefix"
    ROUNDED = "rounded"
    STEP_OFFSET = "stepOffset"
    PRESET = "preset"

    @property
    def attribute(self) -> str:
        """Attribute name on OptionBundle."""
        return _camel_to_snake(self.value)

    @classmethod
    def lookup(cls, key: Any) -> Optional["OptionField"]:
        """Resolve a raw key to a field, or None if it names no option."""
        name = canonical_key(key)
        for member in cls:
            if member.value == name:
                return member
        return None


class StepField(Enum):
    """Per-step fields."""

    STEP = "step"
    FONT_SIZE = "fontSize"
    LINE_HEIGHT = "lineHeight"
    LETTER_SPACING = "letterSpacing"

    @property
    def attribute(self) -> str:
        """Attribute name on StepDefinition."""
        return _camel_to_snake(self.value)

    @property
    def css_property(self) -> str:
        """Kebab-case spelling, as used in documents."""
        return _camel_to_kebab(self.value)

    @classmethod
    def lookup(cls, key: Any) -> Optional["StepField"]:
        """Resolve a raw key to a field, or None if it names no step field."""
        name = canonical_key(key)
        for member in cls:
            if member.value == name:
                return member
        return None


@dataclass(frozen=True)
class OptionBundle:
    """
    Fully resolved plugin-level options for one resolution pass.

    Properties:
        scale: Ratio between consecutive steps (> 0)
        font_size: Base font size in px (> 0)
        line_height: Default line height, canonical CSS value ("1.5", "24px")
        prefix: Identifier-safe prefix for generated names (may be empty)
        rounded: Round computed pixel sizes to whole numbers
        step_offset: Added to every step before computing its size
        preset: Name of the preset step map, or None

    INVARIANT:
        Every field is present and validated. Absent or invalid raw
        inputs have already been replaced by defaults.
    """

    scale: float
    font_size: float
    line_height: str
    prefix: str
    rounded: bool
    step_offset: float
    preset: Optional[str] = None

    def get(self, field: OptionField) -> Any:
        return getattr(self, field.attribute)


@dataclass
class StepDefinition:
    """
    One named step before generation.

    Properties:
        step: Position on the geometric scale
        font_size: Explicit size override, used verbatim when present
        line_height: Per-step line height
        letter_spacing: Per-step letter spacing

    A definition is valid only if `step` or `font_size` is present.
    When `font_size` is set, `step` is kept but has no effect.
    """

    step: Optional[float] = None
    font_size: Optional[str] = None
    line_height: Optional[str] = None
    letter_spacing: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.step is not None or self.font_size is not None

    @classmethod
    def from_fields(cls, values: Dict[StepField, Any]) -> "StepDefinition":
        return cls(**{f.attribute: v for f, v in values.items()})

    def to_dict(self) -> Dict[str, Any]:
        """Raw-identifier mapping of the fields that are set."""
        out: Dict[str, Any] = {}
        for f in StepField:
            value = getattr(self, f.attribute)
            if value is not None:
                out[f.value] = value
        return out


@dataclass(frozen=True)
class OutputEntry:
    """
    Generated values for one step.

    Properties:
        name: Step name (e.g. "sm", "2xl")
        variable: Base variable name (e.g. "text-sm")
        size: Size declaration, e.g. "0.813rem /* 13px */" or "2rem"
        line_height: Line-height declaration
        letter_spacing: Letter-spacing declaration, None when the step has none

    Declarations are finished value strings. Where they end up
    (custom properties, JSON, ...) is the concern of backends.
    """

    name: str
    variable: str
    size: str
    line_height: str
    letter_spacing: Optional[str] = None

    def declarations(self) -> List[Tuple[str, str]]:
        """
        Variable name / value pairs in emission order.

        Returns:
            [(variable, size), (variable--line-height, line_height), ...]
            with the letter-spacing pair only when one is defined.
        """
        pairs = [
            (self.variable, self.size),
            (f"{self.variable}--line-height", self.line_height),
        ]
        if self.letter_spacing is not None:
            pairs.append((f"{self.variable}--letter-spacing", self.letter_spacing))
        return pairs
