"""
CSS generator for resolved type scales.

Converts an output map into CSS text.

Supports two modes:
    - VARIABLES: Custom properties only (--text-sm: ...;)
    - UTILITIES: Custom properties plus one class per step that applies them
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple

from typescale.model import OutputEntry


class CssMode(Enum):
    """Emission modes for CSS output."""
    VARIABLES = "variables"    # Custom properties only
    UTILITIES = "utilities"    # Custom properties + utility classes


def declarations(outputs: Dict[str, OutputEntry]) -> List[Tuple[str, str]]:
    """
    Custom property declarations for every entry, in output order.

    Returns:
        [("--text-sm", "0.875rem /* 14px */"), ("--text-sm--line-height", "1.5"), ...]
    """
    pairs = []
    for entry in outputs.values():
        for name, value in entry.declarations():
            pairs.append((f"--{name}", value))
    return pairs


def _utility_rule(entry: OutputEntry, indent: str) -> List[str]:
    lines = [f".{entry.variable} {{"]
    lines.append(f"{indent}font-size: var(--{entry.variable});")
    lines.append(f"{indent}line-height: var(--{entry.variable}--line-height);")
    if entry.letter_spacing is not None:
        lines.append(f"{indent}letter-spacing: var(--{entry.variable}--letter-spacing);")
    lines.append("}")
    return lines


def generate_css(
    outputs: Dict[str, OutputEntry],
    selector: Optional[str] = ":root",
    mode: CssMode = CssMode.VARIABLES,
    indent: str = "  ",
) -> str:
    """
    Generate CSS for an output map.

    Args:
        outputs: Output map from a resolution pass
        selector: Rule wrapping the custom properties. None emits bare
            declarations, ready to splice into an existing rule.
        mode: VARIABLES or UTILITIES
        indent: Indentation inside rule blocks

    Returns:
        CSS text
    """
    pairs = declarations(outputs)
    lines = []

    if selector is None:
        lines.extend(f"{name}: {value};" for name, value in pairs)
    else:
        lines.append(f"{selector} {{")
        lines.extend(f"{indent}{name}: {value};" for name, value in pairs)
        lines.append("}")

    if mode == CssMode.UTILITIES:
        for entry in outputs.values():
            lines.append("")
            lines.extend(_utility_rule(entry, indent))

    return "\n".join(lines)


def save_css_file(
    outputs: Dict[str, OutputEntry],
    filename: str,
    selector: Optional[str] = ":root",
    mode: CssMode = CssMode.VARIABLES,
) -> None:
    """
    Generate CSS and save to file.

    Args:
        outputs: Output map to render
        filename: Output file path (.css extension recommended)
        selector: Rule wrapping the custom properties
        mode: Emission mode
    """
    css = generate_css(outputs, selector=selector, mode=mode)
    with open(filename, "w", encoding="utf-8") as f:
        f.write(css + "\n")


__all__ = ["CssMode", "declarations", "generate_css", "save_css_file"]
