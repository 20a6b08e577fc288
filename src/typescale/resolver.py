"""
Option and Step Resolvers (Layer 2: raw sources -> resolved configuration).

Options are merged shallowly, field by field:

    built-in defaults < programmatic options < document options

Steps are merged two levels deep (step name, then field name):

    programmatic steps < preset steps < document steps

A higher source overrides individual fields of a step, never the whole
record. Every merged value is normalized; rejections are logged to the
pass's Diagnostics and the field is dropped (options then fall back to
their built-in default).

IMPORTANT: If no step survives resolution, the built-in DEFAULT_STEPS
map is used. The fallback is to the defaults, NOT to the preset.
"""

from typing import Any, Dict, Mapping, Optional, Tuple

from typescale.diagnostics import Diagnostics
from typescale.model import OptionBundle, OptionField, StepDefinition, StepField
from typescale.normalizers import (
    format_number,
    normalize_option,
    normalize_step_field,
    parse_float,
)
from typescale.presets import DEFAULT_STEPS
from typescale.validators import validate_option


PROGRAMMATIC = "programmatic"
PRESET = "preset"
DOCUMENT = "document"

DEFAULT_OPTIONS = OptionBundle(
    scale=1.125,
    font_size=16.0,
    line_height="1.5",
    prefix="text",
    rounded=True,
    step_offset=0.0,
    preset=None,
)

# (raw value, name of the source it came from)
_Sourced = Tuple[Any, str]


def _display(value: Any) -> str:
    """Render a value for diagnostic messages."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def _require_mapping(source: Any, what: str) -> Mapping:
    if source is None:
        return {}
    if not isinstance(source, Mapping):
        raise TypeError(f"{what} must be a mapping, got {type(source).__name__}")
    return source


# =========================================================================
# OPTIONS
# =========================================================================

def _collect_options(
    source: Optional[Mapping[str, Any]],
    source_name: str,
    diagnostics: Diagnostics,
) -> Dict[OptionField, _Sourced]:
    """Map recognized keys to fields; unknown keys are logged and dropped."""
    collected: Dict[OptionField, _Sourced] = {}
    for key, value in _require_mapping(source, f"{source_name} options").items():
        field = OptionField.lookup(key)
        if field is None:
            diagnostics.add(f'Unknown option "{key}". Skipping.', {"source": source_name, "key": key})
            continue
        collected[field] = (value, source_name)
    return collected


def resolve_options(
    js_options: Optional[Mapping[str, Any]] = None,
    css_options: Optional[Mapping[str, Any]] = None,
    diagnostics: Optional[Diagnostics] = None,
    defaults: OptionBundle = DEFAULT_OPTIONS,
) -> OptionBundle:
    """
    Merge option sources into a fully populated OptionBundle.

    Args:
        js_options: Programmatic options (call-site configuration)
        css_options: Document-level options (highest precedence)
        diagnostics: Sink for rejected values and unknown keys
        defaults: Built-in values used for absent or rejected fields

    Returns:
        OptionBundle with every field present and valid

    Presence at a higher source wins regardless of value. A rejected
    value does not fall back to a lower source; it falls back to the
    built-in default and is logged.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    merged: Dict[OptionField, _Sourced] = {}
    merged.update(_collect_options(js_options, PROGRAMMATIC, diagnostics))
    merged.update(_collect_options(css_options, DOCUMENT, diagnostics))

    resolved: Dict[str, Any] = {}
    for field in OptionField:
        default = defaults.get(field)
        if field not in merged:
            resolved[field.attribute] = default
            continue

        raw, source_name = merged[field]
        value = normalize_option(field, raw)
        if value is not None and validate_option(field, value):
            resolved[field.attribute] = value
            continue

        context = {"source": source_name, "field": field.value}
        if default is None:
            diagnostics.add(f'Invalid {field.value} value "{_display(raw)}". Skipping.', context)
        else:
            diagnostics.add(
                f'Invalid {field.value} value "{_display(raw)}". Using default value: {_display(default)}.',
                context,
            )
        resolved[field.attribute] = default

    return OptionBundle(**resolved)


# =========================================================================
# STEPS
# =========================================================================

def _expand_steps(
    source: Optional[Mapping[str, Any]],
    source_name: str,
    diagnostics: Diagnostics,
) -> Dict[str, Dict[StepField, _Sourced]]:
    """
    Expand one step source to {name: {field: (raw, source)}}.

    A bare scalar is shorthand for {step: value}. Keys are canonicalized
    here so "line-height" and "lineHeight" merge as the same field.
    """
    expanded: Dict[str, Dict[StepField, _Sourced]] = {}

    for name, raw in _require_mapping(source, f"{source_name} steps").items():
        if not isinstance(name, str) or not name.strip():
            diagnostics.add(f'Invalid step name "{name}". Skipping.', {"source": source_name})
            continue

        if isinstance(raw, Mapping):
            fields: Dict[StepField, _Sourced] = {}
            for key, value in raw.items():
                field = StepField.lookup(key)
                if field is None:
                    diagnostics.add(
                        f'Unknown property "{key}" in @{name} step. Skipping.',
                        {"source": source_name, "step": name, "key": key},
                    )
                    continue
                fields[field] = (value, source_name)
            expanded[name] = fields
        elif isinstance(raw, (int, float, str)):
            expanded[name] = {StepField.STEP: (raw, source_name)}
        else:
            diagnostics.add(f'Invalid step config for "{name}". Skipping.', {"source": source_name, "step": name})

    return expanded


def _default_step_map() -> Dict[str, StepDefinition]:
    return {name: StepDefinition(step=parse_float(value)) for name, value in DEFAULT_STEPS.items()}


def resolve_steps(
    js_steps: Optional[Mapping[str, Any]] = None,
    preset_steps: Optional[Mapping[str, Any]] = None,
    css_steps: Optional[Mapping[str, Any]] = None,
    diagnostics: Optional[Diagnostics] = None,
) -> Dict[str, StepDefinition]:
    """
    Merge step sources into a resolved step map.

    Args:
        js_steps: Programmatic steps (lowest precedence)
        preset_steps: Steps of the resolved preset
        css_steps: Document-level steps (highest precedence)
        diagnostics: Sink for rejected fields and dropped steps

    Returns:
        {step name: StepDefinition}, in order of first appearance. Only
        steps defining `step` or `fontSize` are kept; if none remain the
        built-in default step map is returned.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    merged: Dict[str, Dict[StepField, _Sourced]] = {}
    for source_name, source in ((PROGRAMMATIC, js_steps), (PRESET, preset_steps), (DOCUMENT, css_steps)):
        for name, fields in _expand_steps(source, source_name, diagnostics).items():
            merged.setdefault(name, {}).update(fields)

    resolved: Dict[str, StepDefinition] = {}
    for name, fields in merged.items():
        values: Dict[StepField, Any] = {}
        for field, (raw, source_name) in fields.items():
            value = normalize_step_field(field, raw)
            if value is None:
                diagnostics.add(
                    f'Invalid {field.value} value "{_display(raw)}" in @{name}. Skipping.',
                    {"source": source_name, "step": name, "field": field.value},
                )
                continue
            values[field] = value

        definition = StepDefinition.from_fields(values)
        if not definition.is_valid:
            diagnostics.add(
                f'Invalid config for "{name}" step. fontSize and step are both undefined. Skipping.',
                {"step": name},
            )
            continue
        resolved[name] = definition

    if not resolved:
        return _default_step_map()
    return resolved
