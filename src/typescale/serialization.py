"""
Serialization helpers for typescale configuration and results.

Loads programmatic configuration from YAML/JSON into the raw option and
step mappings the resolvers consume, and dumps resolved results through
an explicit intermediate dict representation.

Config document shape:

    scale: 1.25
    fontSize: 16
    preset: tailwind
    steps:
      sm: -1
      hero: {fontSize: 3rem, lineHeight: 1.1}
"""
from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Tuple

import yaml

from typescale.diagnostics import Diagnostic
from typescale.engine import ScaleResult
from typescale.model import OptionBundle, OptionField, OutputEntry, StepDefinition


STEPS_KEY = "steps"


class ConfigLoadError(Exception):
    """Raised when a configuration document cannot be read into raw sources."""
    pass


# =========================================================================
# CONFIG LOADING
# =========================================================================

def config_from_dict(d: Any) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Split a config mapping into (raw_options, raw_steps).

    Values are left raw; normalization happens in the resolvers.
    """
    if d is None:
        return {}, {}
    if not isinstance(d, Mapping):
        raise ConfigLoadError(f"Config must be a mapping, got {type(d).__name__}")

    options = {k: v for k, v in d.items() if k != STEPS_KEY}
    steps = d.get(STEPS_KEY) or {}
    if not isinstance(steps, Mapping):
        raise ConfigLoadError(f"'{STEPS_KEY}' must be a mapping, got {type(steps).__name__}")
    return options, dict(steps)


def config_from_yaml(s: str) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML config: {e}")
    return config_from_dict(d)


def config_from_json(s: str) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise ConfigLoadError(f"Invalid JSON config: {e}")
    return config_from_dict(d)


def load_config_file(filepath: str) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Load a .json, .yaml or .yml config file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ConfigLoadError: If the document is not a valid config
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Config file not found: {filepath}")

    if filepath.lower().endswith(".json"):
        return config_from_json(content)
    return config_from_yaml(content)


# =========================================================================
# RESULTS
# =========================================================================

def options_to_dict(o: OptionBundle) -> Dict[str, Any]:
    return {f.value: o.get(f) for f in OptionField}


def steps_to_dict(steps: Dict[str, StepDefinition]) -> Dict[str, Dict[str, Any]]:
    return {name: s.to_dict() for name, s in steps.items()}


def output_to_dict(e: OutputEntry) -> Dict[str, Any]:
    d = {"variable": e.variable, "size": e.size, "line_height": e.line_height}
    if e.letter_spacing is not None:
        d["letter_spacing"] = e.letter_spacing
    return d


def output_from_dict(name: str, d: Dict[str, Any]) -> OutputEntry:
    return OutputEntry(
        name=name,
        variable=d["variable"],
        size=d["size"],
        line_height=d["line_height"],
        letter_spacing=d.get("letter_spacing"),
    )


def outputs_to_dict(outputs: Dict[str, OutputEntry]) -> Dict[str, Dict[str, Any]]:
    return {name: output_to_dict(e) for name, e in outputs.items()}


def outputs_from_dict(d: Dict[str, Any]) -> Dict[str, OutputEntry]:
    return {name: output_from_dict(name, v) for name, v in d.items()}


def diagnostic_to_dict(d: Diagnostic) -> Dict[str, Any]:
    return {"message": d.message, "context": d.context}


def result_to_dict(r: ScaleResult) -> Dict[str, Any]:
    return {
        "options": options_to_dict(r.options),
        "steps": steps_to_dict(r.steps),
        "outputs": outputs_to_dict(r.outputs),
        "diagnostics": [diagnostic_to_dict(d) for d in r.diagnostics],
    }


def outputs_to_json(outputs: Dict[str, OutputEntry]) -> str:
    return json.dumps(outputs_to_dict(outputs), sort_keys=True)


def outputs_from_json(s: str) -> Dict[str, OutputEntry]:
    return outputs_from_dict(json.loads(s))


def outputs_to_yaml(outputs: Dict[str, OutputEntry]) -> str:
    return yaml.safe_dump(outputs_to_dict(outputs), sort_keys=False)


def outputs_from_yaml(s: str) -> Dict[str, OutputEntry]:
    return outputs_from_dict(yaml.safe_load(s) or {})


def result_to_json(r: ScaleResult) -> str:
    return json.dumps(result_to_dict(r), sort_keys=True)
