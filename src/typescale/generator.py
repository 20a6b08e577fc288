"""
Scale Generator (Layer 3: resolved configuration -> output values).

For each resolved step:

    size          explicit fontSize verbatim, otherwise
                  px  = fontSize * scale ** (step + stepOffset)
                  px  = round(px) if rounded else px to 2 decimals
                  rem = px / BASE_FONT_SIZE to 3 decimals
                  "<rem>rem /* <px>px */"
    line height   the step's own, else the option default (no conversion)
    letter space  the step's own, else omitted

Output names are "<prefix>-<step>" ("<step>" when the prefix is empty),
with "--line-height" / "--letter-spacing" suffixes.
"""

import math
from typing import Dict, Optional

from typescale.diagnostics import Diagnostics
from typescale.model import BASE_FONT_SIZE, OptionBundle, OutputEntry, StepDefinition, StepField
from typescale.normalizers import format_number, round_half_up
from typescale.validators import STEP_VALIDATORS


def variable_name(prefix: str, step_name: str) -> str:
    return f"{prefix}-{step_name}" if prefix else step_name


def compute_size(options: OptionBundle, step: float) -> str:
    """
    Size declaration for a geometric step.

    Example:
        fontSize=16, scale=1.2, rounded, step=-1
        16 * 1.2 ** -1 = 13.33 -> 13px -> 0.8125 -> "0.813rem /* 13px */"
    """
    px = options.font_size * math.pow(options.scale, step + options.step_offset)
    if not math.isfinite(px):
        raise OverflowError(f"font size out of range for step {step}")
    if options.rounded:
        px = float(math.floor(px + 0.5))
    else:
        px = round_half_up(px, 2)
    rem = round_half_up(px / BASE_FONT_SIZE, 3)
    return f"{format_number(rem)}rem /* {format_number(px)}px */"


def _size_declaration(
    name: str,
    definition: StepDefinition,
    options: OptionBundle,
    diagnostics: Optional[Diagnostics],
) -> Optional[str]:
    if definition.font_size is not None:
        return definition.font_size
    if definition.step is None:
        return None
    try:
        return compute_size(options, definition.step)
    except OverflowError:
        if diagnostics is not None:
            diagnostics.add(f"Font size for @{name} is out of range. Skipping.", {"step": name})
        return None


def _check(field: StepField, value: Optional[str], name: str, diagnostics: Optional[Diagnostics]) -> None:
    if value is None or diagnostics is None:
        return
    if not STEP_VALIDATORS[field](value):
        diagnostics.add(
            f'Unrecognized {field.css_property} value "{value}" in @{name}. Emitting as-is.',
            {"step": name, "field": field.value},
        )


def generate_step(
    name: str,
    definition: StepDefinition,
    options: OptionBundle,
    diagnostics: Optional[Diagnostics] = None,
) -> Optional[OutputEntry]:
    """
    Output entry for one step, or None when the step has neither a
    fontSize nor a step value.
    """
    size = _size_declaration(name, definition, options, diagnostics)
    if size is None:
        return None

    _check(StepField.FONT_SIZE, definition.font_size, name, diagnostics)
    _check(StepField.LINE_HEIGHT, definition.line_height, name, diagnostics)
    _check(StepField.LETTER_SPACING, definition.letter_spacing, name, diagnostics)

    return OutputEntry(
        name=name,
        variable=variable_name(options.prefix, name),
        size=size,
        line_height=definition.line_height if definition.line_height is not None else options.line_height,
        letter_spacing=definition.letter_spacing,
    )


def generate(
    options: OptionBundle,
    steps: Dict[str, StepDefinition],
    diagnostics: Optional[Diagnostics] = None,
) -> Dict[str, OutputEntry]:
    """
    Generate output entries for every step.

    Args:
        options: Resolved option bundle
        steps: Resolved step map
        diagnostics: Optional sink; explicit values that do not look like
            valid CSS are reported here but still emitted verbatim

    Returns:
        {step name: OutputEntry}, in step-map order
    """
    outputs: Dict[str, OutputEntry] = {}
    for name, definition in steps.items():
        entry = generate_step(name, definition, options, diagnostics)
        if entry is not None:
            outputs[name] = entry
    return outputs
