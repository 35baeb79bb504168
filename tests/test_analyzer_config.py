"""
Тесты AnalyzerConfiguration.
"""

import dataclasses
import logging
import textwrap

import pytest

from korean_analyser.components import analyzer_config
from korean_analyser.components.analyzer_config import (
    AnalyzerConfiguration,
    AnalyzerMode,
    BASIC_STOP_TAGS,
    DecompoundMode,
)
from korean_analyser.components.pos_tags import POSTag
from korean_analyser.components.user_dictionary import UserDictionary
from korean_analyser.config import Config


class TestBasicMode:
    """Пресет BASIC."""

    def test_basic_values(self):
        configuration = AnalyzerConfiguration.from_mode(AnalyzerMode.BASIC)

        assert configuration.decompound_mode is DecompoundMode.MIXED
        assert configuration.stop_tags == BASIC_STOP_TAGS
        assert configuration.output_unknown_unigrams is False

    def test_basic_loads_bundled_dictionary(self):
        configuration = AnalyzerConfiguration.from_mode()

        assert configuration.user_dictionary is not None
        assert len(configuration.user_dictionary) > 0
        assert "루씬" in {e.surface for e in configuration.user_dictionary}

    def test_mode_given_as_string(self):
        assert AnalyzerConfiguration.from_mode("basic").decompound_mode is DecompoundMode.MIXED

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            AnalyzerConfiguration.from_mode("ADVANCED")

    def test_missing_dictionary_is_not_fatal(self, monkeypatch, caplog):
        monkeypatch.setattr(analyzer_config, "USER_DICT_RESOURCE", "resources/userdict/missing.txt")

        with caplog.at_level(logging.ERROR):
            configuration = AnalyzerConfiguration.from_mode()

        assert configuration.user_dictionary is None
        assert configuration.stop_tags == BASIC_STOP_TAGS
        assert any("словарь" in r.getMessage() for r in caplog.records)

    def test_basic_stop_tags_content(self):
        assert POSTag.J in BASIC_STOP_TAGS
        assert POSTag.E in BASIC_STOP_TAGS
        assert POSTag.NNG not in BASIC_STOP_TAGS
        assert POSTag.VV not in BASIC_STOP_TAGS


class TestExplicitConfiguration:
    """Явный конструктор и вспомогательные методы."""

    def test_values_kept_as_given(self):
        dictionary = UserDictionary.from_lines(["키위 NNP"])
        configuration = AnalyzerConfiguration(
            user_dictionary=dictionary,
            decompound_mode=DecompoundMode.NONE,
            stop_tags={POSTag.J},
            output_unknown_unigrams=True,
        )

        assert configuration.user_dictionary is dictionary
        assert configuration.decompound_mode is DecompoundMode.NONE
        assert configuration.stop_tags == frozenset({POSTag.J})
        assert configuration.output_unknown_unigrams is True

    def test_strings_are_normalised(self):
        configuration = AnalyzerConfiguration(None, "discard", ["j", "SP"])

        assert configuration.decompound_mode is DecompoundMode.DISCARD
        assert configuration.stop_tags == frozenset({POSTag.J, POSTag.SP})

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            AnalyzerConfiguration(None, DecompoundMode.MIXED, ["NOPE"])
        with pytest.raises(ValueError):
            AnalyzerConfiguration(None, "SOMETIMES")

    def test_immutable(self, basic_configuration):
        with pytest.raises(dataclasses.FrozenInstanceError):
            basic_configuration.output_unknown_unigrams = True

    def test_with_stop_tags(self, basic_configuration):
        narrowed = basic_configuration.with_stop_tags(["J"])

        assert narrowed.stop_tags == frozenset({POSTag.J})
        assert narrowed.decompound_mode is basic_configuration.decompound_mode
        assert basic_configuration.stop_tags == BASIC_STOP_TAGS

    def test_describe(self, basic_configuration):
        info = basic_configuration.describe()

        assert info["decompound_mode"] == "MIXED"
        assert info["stop_tags"] == sorted(t.value for t in BASIC_STOP_TAGS)
        assert info["user_dictionary"] is None
        assert info["user_dictionary_entries"] == 0


class TestFromConfig:
    """Конфигурация, собранная из config.yaml."""

    def test_custom_mode(self, tmp_path):
        dict_path = tmp_path / "userdict.txt"
        dict_path.write_text("# test\n형태소분석 NNG\n", encoding="utf-8")
        cfg_path = tmp_path / "config.yaml"
        cfg_path.write_text(textwrap.dedent(
            f"""
            analyzer:
              mode: CUSTOM
              decompound_mode: NONE
              stop_tags: [J, E]
              output_unknown_unigrams: true
              user_dictionary: "{dict_path.as_posix()}"
            """
        ), encoding="utf-8")

        configuration = AnalyzerConfiguration.from_config(Config(config_path=str(cfg_path)))

        assert configuration.decompound_mode is DecompoundMode.NONE
        assert configuration.stop_tags == frozenset({POSTag.J, POSTag.E})
        assert configuration.output_unknown_unigrams is True
        assert [e.surface for e in configuration.user_dictionary] == ["형태소분석"]

    def test_basic_mode_from_config(self, tmp_path):
        cfg_path = tmp_path / "config.yaml"
        cfg_path.write_text("analyzer:\n  mode: BASIC\n", encoding="utf-8")

        configuration = AnalyzerConfiguration.from_config(Config(config_path=str(cfg_path)))

        assert configuration.stop_tags == BASIC_STOP_TAGS
        assert configuration.decompound_mode is DecompoundMode.MIXED

    def test_custom_mode_missing_dictionary_fails(self, tmp_path):
        cfg_path = tmp_path / "config.yaml"
        cfg_path.write_text(textwrap.dedent(
            f"""
            analyzer:
              mode: CUSTOM
              user_dictionary: "{(tmp_path / 'absent.txt').as_posix()}"
            """
        ), encoding="utf-8")

        with pytest.raises(OSError):
            AnalyzerConfiguration.from_config(Config(config_path=str(cfg_path)))
