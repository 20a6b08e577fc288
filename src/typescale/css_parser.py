"""
CSS block parser (raw input -> raw option and step sources).

Reads the body of a `@typescaler { ... }` block and splits it into the
two raw mappings the resolvers consume. Extraction is syntactic only;
values are checked later by the normalizers.

Syntax:
    font-size: 18px;                 option
    scale: 1.25;                     option
    --sm: -1;                        step shorthand (step)
    --xl: 2 1.8 -0.03em;             step shorthand (step line-height letter-spacing)
    --md--line-height: 1.5;          single step field
    --hero--font-size: 3rem;         single step field

Comments are ignored. The `@typescaler { }` wrapper is optional. A `;`
inside a quoted value (`prefix: "a;b"`) does not end the declaration.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from typescale.diagnostics import Diagnostics
from typescale.model import OptionField, StepField
from typescale.resolver import DOCUMENT


class CSSParseError(Exception):
    """Raised when a block is structurally broken (unbalanced or nested braces)."""
    pass


_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_AT_RULE_RE = re.compile(r"^@([A-Za-z_-][\w-]*)\s*\{(.*)\}$", re.DOTALL)

SHORTHAND_FIELDS = (StepField.STEP, StepField.LINE_HEIGHT, StepField.LETTER_SPACING)


@dataclass
class CssBlock:
    """Raw sources extracted from one block."""
    options: Dict[str, Any] = field(default_factory=dict)
    steps: Dict[str, Dict[str, Any]] = field(default_factory=dict)


def _extract_body(text: str) -> str:
    """Strip comments and the optional at-rule wrapper."""
    text = _COMMENT_RE.sub("", text).strip()

    if text.startswith("@"):
        match = _AT_RULE_RE.match(text)
        if not match:
            raise CSSParseError(f"Malformed at-rule: {text[:40]!r}")
        text = match.group(2)

    if "{" in text or "}" in text:
        raise CSSParseError("Nested blocks are not supported inside a type-scale block")
    return text


def _split_outside_quotes(body: str) -> List[str]:
    """Split on `;`, ignoring separators inside single or double quotes."""
    chunks = []
    start = 0
    quote = None
    for i, ch in enumerate(body):
        if quote:
            if ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
        elif ch == ";":
            chunks.append(body[start:i])
            start = i + 1
    chunks.append(body[start:])
    return chunks


def _split_declarations(body: str, diagnostics: Diagnostics) -> List[Tuple[str, str]]:
    declarations = []
    for chunk in _split_outside_quotes(body):
        chunk = chunk.strip()
        if not chunk:
            continue
        prop, sep, value = chunk.partition(":")
        prop, value = prop.strip(), value.strip()
        if not sep or not prop:
            diagnostics.add(f'Malformed declaration "{chunk}". Skipping.', {"source": DOCUMENT})
            continue
        declarations.append((prop, value))
    return declarations


def _coerce_option(prop: str, value: str) -> Any:
    """
    Apply the only type coercions the engine expects from documents:
    numeric `scale` and boolean `rounded`. Everything else stays raw.
    """
    option = OptionField.lookup(prop)
    if option == OptionField.SCALE:
        try:
            return float(value)
        except ValueError:
            return value
    if option == OptionField.ROUNDED:
        lowered = value.lower()
        if lowered in ("true", "false"):
            return lowered == "true"
    return value


def _parse_shorthand(name: str, value: str, step: Dict[str, Any], diagnostics: Diagnostics) -> None:
    tokens = value.split()
    for step_field, token in zip(SHORTHAND_FIELDS, tokens):
        step[step_field.value] = token
    for extra in tokens[len(SHORTHAND_FIELDS):]:
        diagnostics.add(
            f'Too many values in shorthand --{name}. Ignoring "{extra}".',
            {"source": DOCUMENT, "step": name},
        )


def parse_css_block(text: str, diagnostics: Optional[Diagnostics] = None) -> CssBlock:
    """
    Parse a block body into raw option and step sources.

    Args:
        text: Block body, with or without the `@typescaler { }` wrapper
        diagnostics: Sink for malformed or unknown declarations

    Returns:
        CssBlock with `options` (raw keys as written) and `steps`
        (step name -> {field identifier: raw string})

    Raises:
        CSSParseError: If braces are unbalanced or nested
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    block = CssBlock()
    for prop, value in _split_declarations(_extract_body(text), diagnostics):
        if not prop.startswith("--"):
            block.options[prop] = _coerce_option(prop, value)
            continue

        name, _, sub = prop[2:].partition("--")
        if not name:
            diagnostics.add(f'Malformed step declaration "{prop}". Skipping.', {"source": DOCUMENT})
            continue

        if not sub:
            _parse_shorthand(name, value, block.steps.setdefault(name, {}), diagnostics)
            continue

        step_field = StepField.lookup(sub)
        if step_field is None:
            diagnostics.add(
                f'Unknown property "{sub}" in {prop}. Ignoring.',
                {"source": DOCUMENT, "step": name, "key": sub},
            )
            continue
        block.steps.setdefault(name, {})[step_field.value] = value

    return block


def parse_css_file(filepath: str, diagnostics: Optional[Diagnostics] = None) -> CssBlock:
    """
    Parse a file holding a single block.

    Raises:
        FileNotFoundError: If file doesn't exist
        CSSParseError: If the block is structurally broken
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"CSS file not found: {filepath}")

    return parse_css_block(content, diagnostics)


__all__ = [
    "parse_css_block",
    "parse_css_file",
    "CssBlock",
    "CSSParseError",
]
