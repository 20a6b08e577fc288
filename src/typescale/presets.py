"""
Preset step maps.

Static data only. A preset is a named, canned step map that supplies
reasonable steps without caller-authored definitions. DEFAULT_STEPS is
the last-resort map used when nothing else resolves to any step; it is
deliberately NOT one of the presets.
"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


# Tailwind-like names, each a bare step shorthand.
DEFAULT_STEPS: Mapping[str, Any] = MappingProxyType({
    "xs": -2,
    "sm": -1,
    "base": 0,
    "md": 0,  # alias for base
    "lg": 1,
    "xl": 2,
    "2xl": 3,
    "3xl": 4,
    "4xl": 5,
    "5xl": 6,
    "6xl": 7,
    "7xl": 8,
    "8xl": 9,
    "9xl": 10,
})


_DEFAULT_PRESET: Dict[str, Dict[str, Any]] = {
    "xs": {"step": -2, "lineHeight": "1.6"},
    "sm": {"step": -1, "lineHeight": "1.5"},
    "md": {"step": 0, "lineHeight": "1.5"},
    "lg": {"step": 1, "lineHeight": "1.4"},
    "xl": {"step": 2, "lineHeight": "1.3"},
    "2xl": {"step": 3, "lineHeight": "1.2"},
    "3xl": {"step": 4, "lineHeight": "1.1"},
    "4xl": {"step": 5, "lineHeight": "1.1", "letterSpacing": "-0.01em"},
}

_TAILWIND_PRESET: Dict[str, Dict[str, Any]] = {
    "xs": {"step": -2, "lineHeight": "1rem"},
    "sm": {"step": -1, "lineHeight": "1.25rem"},
    "base": {"step": 0, "lineHeight": "1.5rem"},
    "lg": {"step": 1, "lineHeight": "1.75rem"},
    "xl": {"step": 2, "lineHeight": "1.75rem"},
    "2xl": {"step": 3, "lineHeight": "2rem"},
    "3xl": {"step": 4, "lineHeight": "2.25rem"},
    "4xl": {"step": 5, "lineHeight": "2.5rem"},
    "5xl": {"step": 6, "lineHeight": "1"},
    "6xl": {"step": 7, "lineHeight": "1"},
    "7xl": {"step": 8, "lineHeight": "1"},
    "8xl": {"step": 9, "lineHeight": "1"},
    "9xl": {"step": 10, "lineHeight": "1"},
}

PRESETS: Mapping[str, Mapping[str, Dict[str, Any]]] = MappingProxyType({
    "default": MappingProxyType(_DEFAULT_PRESET),
    "tailwind": MappingProxyType(_TAILWIND_PRESET),
})


def preset_names():
    return sorted(PRESETS)


def get_preset(name: Optional[str]) -> Dict[str, Dict[str, Any]]:
    """
    Step map for a preset name.

    Unknown names and None yield an empty map. The result is a fresh copy;
    callers may mutate it freely.
    """
    if name is None:
        return {}
    steps = PRESETS.get(name, {})
    return {step_name: dict(fields) for step_name, fields in steps.items()}
