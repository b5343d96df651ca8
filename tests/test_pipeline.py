"""Tests for scrubbing.service.pipeline — declarative recipes."""

import textwrap

import pytest

from scrubbing.core.exceptions import (
    ConfigurationError,
    PatternNotFoundError,
)
from scrubbing.service.pipeline import (
    build_engine,
    load_recipe,
    parse_recipe,
    run_recipe,
)


CAR_RECIPE = {
    "char_from": "ñ'",
    "char_to": "n#",
    "words": {"chevrolet": "Ford", "dodge": "Mercedes"},
    "words_ignore_case": True,
    "patterns": [["BMW", "Fiat"], [r"\s+", " "], [r"^\s*|\s*$", ""]],
    "steps": [
        {"op": "strip", "pattern": "[,]"},
        {"op": "map_chars"},
        {"op": "map_words"},
        {"op": "translate_patterns"},
    ],
}


class TestParseRecipe:
    def test_valid(self):
        recipe = parse_recipe(CAR_RECIPE)
        assert len(recipe.steps) == 4
        assert recipe.patterns[0] == ("BMW", "Fiat")

    def test_empty(self):
        recipe = parse_recipe({})
        assert recipe.steps == []

    def test_unequal_char_sequences(self):
        with pytest.raises(ConfigurationError):
            parse_recipe({"char_from": "ab", "char_to": "a"})

    def test_strip_needs_pattern(self):
        with pytest.raises(ConfigurationError):
            parse_recipe({"steps": [{"op": "strip"}]})

    def test_apply_named_needs_name(self):
        with pytest.raises(ConfigurationError):
            parse_recipe({"steps": [{"op": "apply_named"}]})

    def test_unknown_op(self):
        with pytest.raises(ConfigurationError):
            parse_recipe({"steps": [{"op": "explode"}]})


class TestBuildEngine:
    def test_tables_configured(self):
        engine = build_engine("x", parse_recipe(CAR_RECIPE))
        assert engine.char_table == {"ñ": "n", "'": "#"}
        assert engine.word_table["CHEVROLET"] == "Ford"
        assert engine.pattern_list[1] == (r"\s+", " ")
        assert engine.to_string() == "x"

    def test_options(self):
        engine = build_engine(
            "x", parse_recipe({"ignore_case": True, "timeout_seconds": 0.5})
        )
        assert engine.case_insensitive is True
        assert engine.timeout == 0.5

    def test_char_map_merged_after_sequences(self):
        engine = build_engine(
            "x", parse_recipe({"char_from": "a", "char_to": "b", "char_map": {"c": "d"}})
        )
        assert engine.char_table == {"a": "b", "c": "d"}

    def test_named_patterns_added(self):
        engine = build_engine("x", parse_recipe({"named_patterns": {"Hyphen": "-"}}))
        assert engine.named_patterns["Hyphen"] == "-"
        assert "Email" in engine.named_patterns


class TestRunRecipe:
    def test_steps_applied_in_order(self):
        result = run_recipe(
            "  Señor, the Chevrolet guys don't like   Dodge BMWs  ",
            parse_recipe(CAR_RECIPE),
        )
        assert result.scrubbed_text == "Senor the Ford guys don#t like Mercedes Fiats"
        assert result.steps == ["strip", "map_chars", "map_words", "translate_patterns"]
        assert result.original_text.startswith("  Señor,")

    def test_disabled_step_skipped(self):
        recipe = parse_recipe(
            {
                "steps": [
                    {"op": "apply_named", "name": "WhitespaceCompact", "replacement": "-"},
                    {"op": "strip", "pattern": "-", "enabled": False},
                ]
            }
        )
        result = run_recipe("a b  c", recipe)
        assert result.scrubbed_text == "a-b-c"
        assert result.steps == ["apply_named"]

    def test_ignore_case_step(self):
        recipe = parse_recipe(
            {
                "steps": [
                    {"op": "ignore_case"},
                    {"op": "strip", "pattern": "wtf"},
                ]
            }
        )
        result = run_recipe("WTF wtf", recipe)
        assert result.scrubbed_text == " "
        assert result.metadata["case_insensitive"] is True

    def test_map_words_separator(self):
        recipe = parse_recipe(
            {"words": {"b": "B"}, "steps": [{"op": "map_words", "separator": ", "}]}
        )
        assert run_recipe("a, b, c", recipe).scrubbed_text == "a, B, c"

    def test_engine_errors_propagate(self):
        recipe = parse_recipe({"steps": [{"op": "apply_named", "name": "Missing"}]})
        with pytest.raises(PatternNotFoundError, match="Missing"):
            run_recipe("text", recipe)

    def test_recipe_is_reusable(self):
        recipe = parse_recipe(
            {"steps": [{"op": "apply_named", "name": "WhitespaceEnds"}]}
        )
        assert run_recipe("  a  ", recipe).scrubbed_text == "a"
        assert run_recipe(" b ", recipe).scrubbed_text == "b"


class TestLoadRecipe:
    def test_from_yaml(self, tmp_path):
        path = tmp_path / "slug.yaml"
        path.write_text(
            textwrap.dedent(
                """\
                patterns:
                  - ['\\s+', '-']
                steps:
                  - op: apply_named
                    name: WhitespaceEnds
                  - op: translate_patterns
                """
            ),
            encoding="utf-8",
        )
        recipe = load_recipe(path)
        assert recipe.patterns == [(r"\s+", "-")]
        result = run_recipe("  Front Brake Pad  ", recipe)
        assert result.scrubbed_text == "Front-Brake-Pad"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_recipe(tmp_path / "nope.yaml")

    def test_bad_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("steps: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_recipe(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_recipe(path).steps == []
