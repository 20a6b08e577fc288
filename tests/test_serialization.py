"""
Tests for configuration loading and result serialization.

Configs load from YAML/JSON into raw sources; resolved outputs survive a
JSON/YAML round-trip through `typescale.serialization`.
"""

import json

import pytest
from typescale.engine import resolve_typescale
from typescale.serialization import (
    ConfigLoadError,
    config_from_dict,
    config_from_json,
    config_from_yaml,
    load_config_file,
    outputs_from_json,
    outputs_from_yaml,
    outputs_to_dict,
    outputs_to_json,
    outputs_to_yaml,
    result_to_dict,
    result_to_json,
)


YAML_CONFIG = """
scale: 1.25
fontSize: 16
preset: tailwind
steps:
  sm: -1
  hero:
    fontSize: 3rem
    lineHeight: 1.1
"""


def build_sample_result():
    return resolve_typescale(
        js_options={"scale": 1.2, "unknown": True},
        js_steps={"sm": -1, "xl": {"step": 2, "letterSpacing": "-0.02em"}},
    )


class TestConfigLoading:
    """Config documents split into raw option and step sources."""

    def test_yaml_config(self):
        options, steps = config_from_yaml(YAML_CONFIG)

        assert options == {"scale": 1.25, "fontSize": 16, "preset": "tailwind"}
        assert steps == {"sm": -1, "hero": {"fontSize": "3rem", "lineHeight": 1.1}}

    def test_json_config(self):
        options, steps = config_from_json('{"prefix": "type", "steps": {"base": 0}}')

        assert options == {"prefix": "type"}
        assert steps == {"base": 0}

    def test_empty_document(self):
        assert config_from_yaml("") == ({}, {})
        assert config_from_dict({"scale": 1.2, "steps": None}) == ({"scale": 1.2}, {})

    def test_non_mapping_config(self):
        with pytest.raises(ConfigLoadError):
            config_from_yaml("- 1\n- 2\n")

    def test_non_mapping_steps(self):
        with pytest.raises(ConfigLoadError, match="steps"):
            config_from_dict({"steps": [1, 2]})

    def test_invalid_json(self):
        with pytest.raises(ConfigLoadError, match="Invalid JSON"):
            config_from_json("{scale: ")

    def test_invalid_yaml(self):
        with pytest.raises(ConfigLoadError, match="Invalid YAML"):
            config_from_yaml("scale: [1.2")

    def test_load_config_file(self, tmp_path):
        yaml_path = tmp_path / "typescale.yml"
        yaml_path.write_text(YAML_CONFIG, encoding="utf-8")
        json_path = tmp_path / "typescale.json"
        json_path.write_text('{"scale": 1.5}', encoding="utf-8")

        assert load_config_file(str(yaml_path))[0]["preset"] == "tailwind"
        assert load_config_file(str(json_path)) == ({"scale": 1.5}, {})

    def test_missing_config_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_config_file(str(tmp_path / "nope.yml"))

    def test_loaded_config_resolves(self):
        options, steps = config_from_yaml(YAML_CONFIG)
        result = resolve_typescale(js_options=options, js_steps=steps)

        assert result.outputs["hero"].size == "3rem"
        assert result.outputs["hero"].line_height == "1.1"
        assert "9xl" in result.outputs


def test_outputs_json_roundtrip():
    outputs = build_sample_result().outputs
    restored = outputs_from_json(outputs_to_json(outputs))
    assert restored == outputs


def test_outputs_yaml_roundtrip():
    outputs = build_sample_result().outputs
    restored = outputs_from_yaml(outputs_to_yaml(outputs))
    assert list(restored) == list(outputs)
    assert outputs_to_dict(restored) == outputs_to_dict(outputs)


def test_letter_spacing_only_when_set():
    data = outputs_to_dict(build_sample_result().outputs)

    assert "letter_spacing" not in data["sm"]
    assert data["xl"]["letter_spacing"] == "-0.02em"


def test_result_to_dict():
    data = result_to_dict(build_sample_result())

    assert data["options"]["scale"] == 1.2
    assert data["options"]["fontSize"] == 16.0
    assert data["steps"]["sm"] == {"step": -1.0}
    assert data["diagnostics"] == [
        {"message": 'Unknown option "unknown". Skipping.', "context": {"source": "programmatic", "key": "unknown"}}
    ]


def test_result_to_json_is_valid_json():
    data = json.loads(result_to_json(build_sample_result()))
    assert set(data) == {"options", "steps", "outputs", "diagnostics"}
