"""
Resolution pass: options -> steps -> outputs.

    raw option sources --resolve_options--> OptionBundle
    preset name        --get_preset-------> preset step map
    raw step sources   --resolve_steps----> {name: StepDefinition}
    both               --generate---------> {name: OutputEntry}

Each pass is a pure function of its inputs. The only state is the
Diagnostics sink, which is created fresh per call unless the host
supplies one.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from typescale.css_parser import parse_css_block
from typescale.diagnostics import Diagnostic, Diagnostics
from typescale.generator import generate
from typescale.model import OptionBundle, OutputEntry, StepDefinition
from typescale.presets import get_preset
from typescale.resolver import resolve_options, resolve_steps


@dataclass
class ScaleResult:
    """Everything one resolution pass produced."""

    options: OptionBundle
    steps: Dict[str, StepDefinition] = field(default_factory=dict)
    outputs: Dict[str, OutputEntry] = field(default_factory=dict)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def messages(self) -> List[str]:
        return [d.message for d in self.diagnostics]


def resolve_typescale(
    js_options: Optional[Mapping[str, Any]] = None,
    js_steps: Optional[Mapping[str, Any]] = None,
    css_options: Optional[Mapping[str, Any]] = None,
    css_steps: Optional[Mapping[str, Any]] = None,
    diagnostics: Optional[Diagnostics] = None,
) -> ScaleResult:
    """
    Run one complete resolution pass.

    Args:
        js_options: Programmatic options
        js_steps: Programmatic step map
        css_options: Document-level options (override programmatic ones)
        css_steps: Document-level step map (overrides preset and programmatic steps)
        diagnostics: Sink to append to; a fresh one is used when omitted

    Returns:
        ScaleResult. `diagnostics` is a snapshot of the sink after the pass.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    options = resolve_options(js_options, css_options, diagnostics)
    steps = resolve_steps(js_steps, get_preset(options.preset), css_steps, diagnostics)
    outputs = generate(options, steps, diagnostics)

    return ScaleResult(options=options, steps=steps, outputs=outputs, diagnostics=diagnostics.entries)


def process_css_block(
    text: str,
    js_options: Optional[Mapping[str, Any]] = None,
    js_steps: Optional[Mapping[str, Any]] = None,
) -> ScaleResult:
    """
    Parse a `@typescaler { ... }` block and resolve it against
    programmatic configuration, sharing one diagnostics sink.
    """
    diagnostics = Diagnostics()
    block = parse_css_block(text, diagnostics)
    return resolve_typescale(
        js_options=js_options,
        js_steps=js_steps,
        css_options=block.options,
        css_steps=block.steps,
        diagnostics=diagnostics,
    )
