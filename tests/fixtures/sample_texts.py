"""Корейские тексты для тестов."""

SAMPLE_SIMPLE_TEXT = "형태소 분석기"

SAMPLE_SENTENCE = "나는 오늘 학교에서 자연어처리 수업을 들었다."

SAMPLE_MIXED_SCRIPT = "Elasticsearch와 루씬으로 검색 엔진을 만든다"

SAMPLE_TEXTS = [
    "형태소 분석기",
    "아버지가 방에 들어가신다",
    "한국어 문장을 분석합니다",
    "검색 엔진의 색인을 만든다",
    "키위는 빠른 형태소 분석기이다",
    "서울특별시 강남구에 있다",
    "딥러닝 모델을 학습했다",
    "오늘 날씨가 정말 좋네요",
]
