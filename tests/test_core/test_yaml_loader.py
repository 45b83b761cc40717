# tests/test_core/test_yaml_loader.py
"""Tests for A_core/A03_yaml_loader.py - YAML 1.2 booleans, first document only."""

from __future__ import annotations

import pytest
import yaml

from A_core.A03_yaml_loader import load_first_document, load_yaml


class TestBooleans:

    @pytest.mark.parametrize("word", ["NO", "no", "ON", "On", "OFF", "YES", "Yes", "Y", "y", "N", "n"])
    def test_yaml_1_1_words_stay_strings(self, word):
        assert load_yaml(f"{word}: x\n") == {word: "x"}
        assert load_yaml(f"value: {word}\n") == {"value": word}

    @pytest.mark.parametrize(
        "word, expected",
        [("true", True), ("True", True), ("TRUE", True), ("false", False), ("False", False), ("FALSE", False)],
    )
    def test_yaml_1_2_words_are_booleans(self, word, expected):
        assert load_yaml(f"value: {word}\n") == {"value": expected}

    def test_other_scalars_unchanged(self):
        assert load_yaml("a: 1\nb: 1.5\nc: null\nd: ~\n") == {"a": 1, "b": 1.5, "c": None, "d": None}

    def test_safe_loader_left_untouched(self):
        assert yaml.safe_load("NO: x\n") == {False: "x"}


class TestFirstDocument:

    def test_plain_mapping(self):
        assert load_first_document("RL: Reinforcement Learning\n") == {"RL": "Reinforcement Learning"}

    def test_body_after_front_matter_is_not_parsed(self):
        text = "---\nRL: Reinforcement Learning\n---\n\n# Notes: see [here]\n- a: b\n  c\n"
        assert load_first_document(text) == {"RL": "Reinforcement Learning"}

    def test_empty_stream(self):
        assert load_first_document("") is None

    def test_error_in_first_document_raises(self):
        with pytest.raises(yaml.YAMLError):
            load_first_document("RL: [unclosed\n")
