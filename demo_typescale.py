#!/usr/bin/env python3
"""
Complete Pipeline Demo: CSS block → Resolution → Outputs → CSS

Shows the full workflow:
1. Parse a @typescaler block
2. Resolve it against programmatic configuration
3. Report diagnostics
4. Generate CSS
"""

from typescale.backends import CssMode, generate_css, save_css_file
from typescale.css_parser import parse_css_block
from typescale.diagnostics import Diagnostics
from typescale.engine import resolve_typescale
from typescale.serialization import outputs_to_json


CSS_BLOCK = """
@typescaler {
    /* minor third */
    scale: 1.2;
    prefix: "type";
    preset: default;
    rounded: maybe;

    --hero: 6 1.1 -0.03em;
    --hero--font-size: clamp(2rem, 5vw, 4rem);
    --caption--line-height: 1.3;
    --sm--color: red;
}
"""

JS_OPTIONS = {"fontSize": 16, "lineHeight": 1.6, "stepOffset": 0}
JS_STEPS = {"base": 0, "lg": {"step": 1, "lineHeight": "1.4"}}


def main():
    print("=" * 80)
    print("COMPLETE PIPELINE DEMO: CSS block → Resolution → CSS")
    print("=" * 80)

    # =========================================================================
    # STEP 1: Parse block
    # =========================================================================
    print("\n1. PARSING BLOCK...")
    diagnostics = Diagnostics()
    block = parse_css_block(CSS_BLOCK, diagnostics)
    print(f"   ✓ Options: {sorted(block.options)}")
    print(f"   ✓ Steps: {list(block.steps)}")

    # =========================================================================
    # STEP 2: Resolve
    # =========================================================================
    print("\n2. RESOLVING...")
    result = resolve_typescale(
        js_options=JS_OPTIONS,
        js_steps=JS_STEPS,
        css_options=block.options,
        css_steps=block.steps,
        diagnostics=diagnostics,
    )
    print(f"   ✓ Scale: {result.options.scale}  Base: {result.options.font_size}px")
    print(f"   ✓ Preset: {result.options.preset}")
    print(f"   ✓ Steps: {len(result.steps)}")
    for name, entry in result.outputs.items():
        print(f"      {entry.variable:<14} {entry.size}")

    # =========================================================================
    # STEP 3: Diagnostics
    # =========================================================================
    print("\n3. DIAGNOSTICS...")
    if result.diagnostics:
        print(f"   Warnings ({len(result.diagnostics)}):")
        for diagnostic in result.diagnostics:
            print(f"      - {diagnostic.message}")
    else:
        print("   ✓ None")

    # =========================================================================
    # STEP 4: Generate CSS
    # =========================================================================
    print("\n4. GENERATING CSS...")
    for mode in (CssMode.VARIABLES, CssMode.UTILITIES):
        filename = f"typescale_{mode.value}.css"
        save_css_file(result.outputs, filename, mode=mode)
        print(f"   ✓ {filename}")

    print("\n" + generate_css(result.outputs))
    print("\nJSON:")
    print(outputs_to_json(result.outputs))


if __name__ == "__main__":
    main()
