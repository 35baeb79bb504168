"""
Набор частей речи для корейских морфем.

Имена тегов совпадают с набором поисковых корейских анализаторов (теги
mecab-ko-dic на основе Sejong, окончания и частицы свёрнуты в E и J).
"""

from enum import Enum
from typing import Union


class POSType(str, Enum):
    """Структура проанализированного токена."""
    MORPHEME = "MORPHEME"
    COMPOUND = "COMPOUND"
    INFLECT = "INFLECT"
    PREANALYSIS = "PREANALYSIS"


class POSTag(str, Enum):
    """Тег части речи с описанием."""

    E = "E"
    IC = "IC"
    J = "J"
    MAG = "MAG"
    MAJ = "MAJ"
    MM = "MM"
    NA = "NA"
    NNB = "NNB"
    NNBC = "NNBC"
    NNG = "NNG"
    NNP = "NNP"
    NP = "NP"
    NR = "NR"
    SC = "SC"
    SE = "SE"
    SF = "SF"
    SH = "SH"
    SL = "SL"
    SN = "SN"
    SP = "SP"
    SSC = "SSC"
    SSO = "SSO"
    SY = "SY"
    UNA = "UNA"
    UNKNOWN = "UNKNOWN"
    VA = "VA"
    VCN = "VCN"
    VCP = "VCP"
    VSV = "VSV"
    VV = "VV"
    VX = "VX"
    XPN = "XPN"
    XR = "XR"
    XSA = "XSA"
    XSN = "XSN"
    XSV = "XSV"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @classmethod
    def resolve(cls, value: Union["POSTag", str]) -> "POSTag":
        """
        Преобразует имя тега (без учёта регистра) или элемент в POSTag.

        Raises:
            ValueError: если такого тега нет в наборе
        """
        if isinstance(value, cls):
            return value
        name = str(value).strip().upper()
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Неизвестный тег части речи: {value!r}") from None


_DESCRIPTIONS = {
    POSTag.E: "Окончание",
    POSTag.IC: "Междометие",
    POSTag.J: "Частица",
    POSTag.MAG: "Наречие",
    POSTag.MAJ: "Союзное наречие",
    POSTag.MM: "Определитель",
    POSTag.NA: "Неизвестно (анализ не удался)",
    POSTag.NNB: "Зависимое существительное",
    POSTag.NNBC: "Зависимое существительное (счётное)",
    POSTag.NNG: "Существительное",
    POSTag.NNP: "Имя собственное",
    POSTag.NP: "Местоимение",
    POSTag.NR: "Числительное",
    POSTag.SC: "Разделитель (· / :)",
    POSTag.SE: "Многоточие",
    POSTag.SF: "Конечная пунктуация (? ! .)",
    POSTag.SH: "Иероглиф (ханча)",
    POSTag.SL: "Иностранное слово",
    POSTag.SN: "Число",
    POSTag.SP: "Пробел",
    POSTag.SSC: "Закрывающая скобка",
    POSTag.SSO: "Открывающая скобка",
    POSTag.SY: "Прочий символ",
    POSTag.UNA: "Неизвестно",
    POSTag.UNKNOWN: "Неизвестно",
    POSTag.VA: "Прилагательное",
    POSTag.VCN: "Отрицательная связка",
    POSTag.VCP: "Связка",
    POSTag.VSV: "Неизвестно (глагольное)",
    POSTag.VV: "Глагол",
    POSTag.VX: "Вспомогательный глагол или прилагательное",
    POSTag.XPN: "Префикс",
    POSTag.XR: "Корень",
    POSTag.XSA: "Суффикс прилагательного",
    POSTag.XSN: "Суффикс существительного",
    POSTag.XSV: "Суффикс глагола",
}
