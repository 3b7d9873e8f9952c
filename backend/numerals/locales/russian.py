"""Russian (ru_RU) number words.

Russian numerals agree with the noun they count. Thousands are feminine
("одна тысяча", "две тысячи"), everything else here is masculine, and the
magnitude noun takes one of three forms depending on the count:

    1, 21, 31 ...        singular          тысяча   миллион
    2-4, 22-24 ...       paucal            тысячи   миллиона
    5-20, 25-30, 11-14   genitive plural   тысяч    миллионов
"""
from ..base import LocaleDictionary, NumeralEngine, Trio
from ..types import Gender, GrammaticalNumber

DICTIONARY = LocaleDictionary(
    zero="ноль",
    ones=("", "один", "два", "три", "четыре", "пять", "шесть", "семь", "восемь", "девять"),
    teens=(
        "десять", "одиннадцать", "двенадцать", "тринадцать", "четырнадцать",
        "пятнадцать", "шестнадцать", "семнадцать", "восемнадцать", "девятнадцать",
    ),
    tens=("", "", "двадцать", "тридцать", "сорок", "пятьдесят", "шестьдесят", "семьдесят", "восемьдесят", "девяносто"),
    hundreds=("", "сто", "двести", "триста", "четыреста", "пятьсот", "шестьсот", "семьсот", "восемьсот", "девятьсот"),
    # singular, paucal, genitive plural
    radix=((), ("тысяча", "тысячи", "тысяч"), ("миллион", "миллиона", "миллионов")),
    delimiters=(" ",),
    variants={
        "feminine_ones": ("", "одна", "две"),
    },
)

FORM_INDEX: dict[GrammaticalNumber, int] = {
    "singular": 0,
    "paucal": 1,
    "genitive_plural": 2,
}

GROUP_GENDER: dict[int, Gender] = {1: "feminine"}


class RussianEngine(NumeralEngine):
    DICTIONARY = DICTIONARY
    SEPARATOR = DICTIONARY.delimiters[0]

    @property
    def locale_id(self) -> str:
        return "ru_RU"

    @property
    def name(self) -> str:
        return "Russian"

    @property
    def native_name(self) -> str:
        return "Русский"

    def render_trio(self, trio: Trio) -> str:
        if not trio.is_present:
            return ""
        d = self.DICTIONARY
        gender = GROUP_GENDER.get(trio.index, "masculine")

        words = [d.hundreds[trio.hundreds]]
        if trio.tens == 1:
            words.append(d.teens[trio.ones])
        else:
            words.append(d.tens[trio.tens])
            words.append(self._ones(trio.ones, gender))
        if trio.index > 0:
            forms = d.radix[trio.index]
            words.append(forms[FORM_INDEX[self._grammatical_number(trio.value)]])
        return self.SEPARATOR.join(word for word in words if word)

    def _ones(self, digit: int, gender: Gender) -> str:
        feminine = self.DICTIONARY.variants["feminine_ones"]
        if gender == "feminine" and digit < len(feminine):
            return feminine[digit]
        return self.DICTIONARY.ones[digit]

    def _genitive_plural_threshold(self, value: int) -> bool:
        """11-14 always govern the genitive plural, whatever the last digit."""
        return 11 <= value % 100 <= 14

    def _grammatical_number(self, value: int) -> GrammaticalNumber:
        if self._genitive_plural_threshold(value):
            return "genitive_plural"
        last_digit = value % 10
        if last_digit == 1:
            return "singular"
        if 2 <= last_digit <= 4:
            return "paucal"
        return "genitive_plural"
