from types import SimpleNamespace
from typing import Dict, List, Tuple

import pytest

from korean_analyser.components.analyzer_config import (
    AnalyzerConfiguration,
    BASIC_STOP_TAGS,
    DecompoundMode,
)
from korean_analyser.models import kiwi_model


@pytest.fixture
def temp_directory(tmp_path):
    """Временная директория для тестов.

    Возвращает уникальную директорию для каждого теста.
    """
    return tmp_path


@pytest.fixture(scope="session")
def sample_texts():
    """Простые наборы корейских текстов для тестирования."""
    from .fixtures.sample_texts import SAMPLE_SIMPLE_TEXT, SAMPLE_SENTENCE, SAMPLE_MIXED_SCRIPT, SAMPLE_TEXTS

    return {
        "simple": SAMPLE_SIMPLE_TEXT,
        "sentence": SAMPLE_SENTENCE,
        "mixed": SAMPLE_MIXED_SCRIPT,
        "many": SAMPLE_TEXTS,
    }


@pytest.fixture
def basic_configuration():
    """Настройки как у BASIC, но без чтения встроенного словаря."""
    return AnalyzerConfiguration(
        user_dictionary=None,
        decompound_mode=DecompoundMode.MIXED,
        stop_tags=BASIC_STOP_TAGS,
        output_unknown_unigrams=False,
    )


def morphemes(*items: Tuple[str, str, int, int]) -> List[SimpleNamespace]:
    """Строит токены в стиле Kiwi из кортежей (form, tag, start, len)."""
    return [SimpleNamespace(form=form, tag=tag, start=start, len=length) for form, tag, start, length in items]


# Готовые разборы Kiwi для подменного движка
KIWI_ANALYSES: Dict[str, List[SimpleNamespace]] = {
    "형태소 분석기": morphemes(("형태소", "NNG", 0, 3), ("분석", "NNG", 4, 2), ("기", "XSN", 6, 1)),
    "나는 학생": morphemes(("나", "NP", 0, 1), ("는", "JX", 1, 1), ("학생", "NNG", 3, 2)),
    "했다": morphemes(("하", "VV", 0, 1), ("었", "EP", 0, 1), ("다", "EF", 1, 1)),
    "사과다": morphemes(("사과", "NNG", 0, 2), ("이", "VCP", 2, 0), ("다", "EF", 2, 1)),
    "ㅋㅋㅋ": morphemes(("ㅋㅋㅋ", "UN", 0, 3)),
    "Apple 제품": morphemes(("Apple", "SL", 0, 5), ("제품", "NNG", 6, 2)),
    "가아": morphemes(("가", "VV", 0, 1), ("어", "EC", 1, 1)),
    "먹었다.": morphemes(("먹", "VV-R", 0, 1), ("었", "EP", 1, 1), ("다", "EF", 2, 1), (".", "SF", 3, 1)),
    "잡았다": morphemes(("잡", "VV", 0, 1), ("었", "EP", 1, 1), ("다", "EF", 2, 1)),
    "學生": morphemes(("學生", "SH", 0, 2)),
}


class FakeKiwi:
    """Замена kiwipiepy.Kiwi, возвращающая готовые разборы."""

    instances: List["FakeKiwi"] = []
    fail_on_init = False

    def __init__(self, **options):
        if FakeKiwi.fail_on_init:
            raise RuntimeError("model files missing")
        self.options = options
        self.user_words: List[Tuple[str, str, float]] = []
        self.tokenize_calls = 0
        FakeKiwi.instances.append(self)

    def add_user_word(self, word, tag="NNP", score=0.0, orig_word=None):
        if tag == "BAD":
            raise ValueError(f"Unknown tag: {tag}")
        if any(w == word and t == tag for w, t, _ in self.user_words):
            return False
        self.user_words.append((word, tag, score))
        return True

    def tokenize(self, text):
        self.tokenize_calls += 1
        if text == "boom":
            raise RuntimeError("analysis failed")
        return KIWI_ANALYSES.get(text, [])


@pytest.fixture
def fake_kiwi(monkeypatch):
    """Подменяет Kiwi в модуле движка на FakeKiwi."""
    FakeKiwi.instances = []
    FakeKiwi.fail_on_init = False
    monkeypatch.setattr(kiwi_model, "Kiwi", FakeKiwi)
    yield FakeKiwi
    FakeKiwi.fail_on_init = False


def pytest_configure(config):
    """Регистрирует маркеры проекта."""
    config.addinivalue_line("markers", "integration: тесты с настоящей моделью Kiwi")
