"""
Typescale Package

Resolves a modular (geometric) type scale from layered configuration and
generates font size, line height and letter spacing values per step.

ARCHITECTURAL GUARANTEE:
------------------------
The engine (normalizers, resolvers, generator) contains ZERO knowledge of:
    - Document syntax (CSS, YAML, ...)
    - Files or other I/O
    - Process-wide mutable state

Reading sources and writing results happen in the adapter layers
(css_parser, serialization, backends). All adapters consume and produce
the same plain mappings and model objects.
"""

__version__ = "0.6.0"
