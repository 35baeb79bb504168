"""
Тесты фильтров токенов сессии.
"""

from korean_analyser.models.base_model import RawToken
from korean_analyser.models.token_filters import lower_case_filter, reading_form_filter, stop_tag_filter


def _token(term, tag="NNG", increment=1, reading=None):
    return RawToken(term=term, start_offset=0, end_offset=len(term),
                    position_increment=increment, left_pos=tag, right_pos=tag, reading=reading)


def test_stop_tag_filter_carries_increments():
    tokens = [_token("나", "NP"), _token("는", "J"), _token("을", "J"), _token("학생")]

    kept = list(stop_tag_filter(tokens, {"J"}))

    assert [t.term for t in kept] == ["나", "학생"]
    assert [t.position_increment for t in kept] == [1, 3]


def test_stop_tag_filter_keeps_zero_increment():
    tokens = [_token("분석기"), _token("분석", increment=0)]

    kept = list(stop_tag_filter(tokens, set()))

    assert [t.position_increment for t in kept] == [1, 0]


def test_stop_tag_filter_trailing_stop_dropped():
    kept = list(stop_tag_filter([_token("사과"), _token("다", "E")], {"E"}))
    assert [t.term for t in kept] == ["사과"]


def test_reading_form_filter():
    """Поверхность иероглифа заменяется хангыльным чтением, токены без чтения не меняются."""
    tokens = [_token("學生", "SH", reading="학생"), _token("잡", "VV"), _token("았", "E")]

    out = list(reading_form_filter(tokens))

    assert [t.term for t in out] == ["학생", "잡", "았"]
    assert out[0].reading == "학생"
    assert out[1].reading is None


def test_lower_case_filter():
    out = list(lower_case_filter([_token("Apple", "SL"), _token("제품")]))
    assert [t.term for t in out] == ["apple", "제품"]
