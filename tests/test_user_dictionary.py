"""
Тесты формата пользовательского словаря.
"""

import pytest

from korean_analyser.components.user_dictionary import UserDictionary, UserDictionaryEntry
from korean_analyser.exceptions import UserDictionaryError


class TestUserDictionary:
    """Тесты для UserDictionary."""

    def test_parse_fields(self):
        dictionary = UserDictionary.from_lines([
            "엘라스틱서치",
            "자연어처리\tNNG",
            "딥러닝 NNG 2.5",
        ])

        assert list(dictionary) == [
            UserDictionaryEntry("엘라스틱서치", "NNP", 0.0),
            UserDictionaryEntry("자연어처리", "NNG", 0.0),
            UserDictionaryEntry("딥러닝", "NNG", 2.5),
        ]

    def test_comments_and_blank_lines(self):
        dictionary = UserDictionary.from_lines([
            "# header",
            "",
            "   ",
            "루씬 NNP  # search library",
        ])

        assert len(dictionary) == 1
        assert dictionary.entries[0].surface == "루씬"

    def test_too_many_fields(self):
        with pytest.raises(UserDictionaryError, match="words.txt:2"):
            UserDictionary.from_lines(["키위", "노리 NNP 1.0 extra"], source="words.txt")

    def test_bad_score(self):
        with pytest.raises(UserDictionaryError):
            UserDictionary.from_lines(["노리 NNP high"])

    def test_open_file(self, tmp_path):
        path = tmp_path / "userdict.txt"
        path.write_text("챗봇 NNG\n노리\n", encoding="utf-8")

        dictionary = UserDictionary.open(path)

        assert dictionary.source == str(path)
        assert [e.surface for e in dictionary] == ["챗봇", "노리"]

    def test_open_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            UserDictionary.open(tmp_path / "missing.txt")

    def test_hashable_and_comparable(self):
        first = UserDictionary.from_lines(["키위 NNP"])
        second = UserDictionary.from_lines(["키위 NNP"])

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_error_is_value_error(self):
        assert issubclass(UserDictionaryError, ValueError)
