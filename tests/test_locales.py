"""
Per-locale number words.

Covers the shared contract (zero, capacity, integer guard, idempotence)
for every locale, then the grammar each language adds on top.
"""

import pytest

from numerals import CapacityExceededError, NotAnIntegerError, get_engine
from numerals.base import Trio

ZERO_WORDS = {
    "ar_AR": "صفر",
    "cs_CZ": "nula",
    "de_DE": "null",
    "en_US": "zero",
    "es_ES": "cero",
    "fr_FR": "zéro",
    "id_ID": "nol",
    "it_IT": "zero",
    "nl_NL": "nul",
    "pt_BR": "zero",
    "pt_PT": "zero",
    "ru_RU": "ноль",
}

LOCALES = sorted(ZERO_WORDS)


def words(locale_id: str, number: int) -> str:
    return get_engine(locale_id).to_words(number)


class TestSharedContract:
    @pytest.mark.parametrize("locale_id", LOCALES)
    def test_zero(self, locale_id):
        assert words(locale_id, 0) == ZERO_WORDS[locale_id]

    @pytest.mark.parametrize("locale_id", LOCALES)
    def test_largest_supported_number(self, locale_id):
        result = words(locale_id, 999_999_999)
        assert result
        assert result == result.strip()

    @pytest.mark.parametrize("locale_id", LOCALES)
    def test_capacity_exceeded(self, locale_id):
        with pytest.raises(CapacityExceededError) as excinfo:
            words(locale_id, 1_000_000_000)
        error = excinfo.value.error
        assert error.code.name == "E2003_OUT_OF_RANGE"
        assert error.metadata["locale"] == locale_id
        assert error.metadata["max_digits"] == 9
        assert error.metadata["digits_required"] == 12

    @pytest.mark.parametrize("locale_id", LOCALES)
    def test_fraction_rejected(self, locale_id):
        with pytest.raises(NotAnIntegerError):
            words(locale_id, 1.5)

    @pytest.mark.parametrize("locale_id", LOCALES)
    def test_negative_rejected(self, locale_id):
        with pytest.raises(NotAnIntegerError):
            words(locale_id, -7)

    @pytest.mark.parametrize("locale_id", LOCALES)
    def test_idempotent(self, locale_id):
        for number in (7, 1234, 1_000_001, 987_654_321):
            assert words(locale_id, number) == words(locale_id, number)

    @pytest.mark.parametrize("locale_id", LOCALES)
    def test_no_doubled_spaces(self, locale_id):
        for number in (1, 10, 101, 1001, 10_010, 100_100, 1_000_000, 1_001_001, 20_000_020):
            result = words(locale_id, number)
            assert "  " not in result
            assert result == result.strip()

    def test_integral_float_accepted(self):
        assert words("en_US", 12.0) == "twelve"


class TestResult:
    def test_ok(self):
        result = get_engine("en_US").to_words_result(42)
        assert result.is_ok()
        assert result.unwrap() == "forty-two"

    def test_err_not_an_integer(self):
        result = get_engine("en_US").to_words_result(1.5)
        assert result.is_err()
        assert result.unwrap_err().code.name == "E2004_INVALID_TYPE"

    def test_err_capacity(self):
        result = get_engine("fr_FR").to_words_result(10 ** 9)
        assert result.unwrap_err().code.name == "E2003_OUT_OF_RANGE"


class TestTrio:
    def test_digits(self):
        trio = Trio(value=305)
        assert (trio.hundreds, trio.tens, trio.ones) == (3, 0, 5)

    def test_presence_is_not_digit_position(self):
        trio = Trio(value=5)
        assert trio.is_present
        assert not trio.has_tens_place
        assert not trio.has_hundreds_place
        assert not Trio(value=0).is_present
        assert Trio(value=10).has_tens_place
        assert Trio(value=100).has_hundreds_place

    def test_position(self):
        assert Trio(value=1, index=0, count=2).has_higher
        assert not Trio(value=1, index=1, count=2).has_higher
        assert Trio(value=120).below_hundred == 20


def _cases(locale_id, table):
    return [(locale_id, number, expected) for number, expected in table]


ENGLISH = {
    1: "one",
    13: "thirteen",
    21: "twenty-one",
    100: "one hundred",
    110: "one hundred and ten",
    1005: "one thousand and five",
    1234: "one thousand two hundred and thirty-four",
    2000: "two thousand",
    1_000_000: "one million",
    1_000_005: "one million and five",
    999_999_999: (
        "nine hundred and ninety-nine million nine hundred and ninety-nine "
        "thousand nine hundred and ninety-nine"
    ),
}

GERMAN = {
    1: "eins",
    17: "siebzehn",
    21: "einundzwanzig",
    100: "einhundert",
    123: "einhundertdreiundzwanzig",
    1000: "eintausend",
    1001: "eintausendeins",
    2021: "zweitausendeinundzwanzig",
    1_000_000: "eine Million",
    1_000_001: "eine Million eins",
    2_000_000: "zwei Millionen",
    21_000_000: "einundzwanzig Millionen",
}

RUSSIAN = {
    1: "один",
    2: "два",
    122: "сто двадцать два",
    1000: "одна тысяча",
    2000: "две тысячи",
    5000: "пять тысяч",
    11_000: "одиннадцать тысяч",
    21_000: "двадцать одна тысяча",
    24_000: "двадцать четыре тысячи",
    1_000_000: "один миллион",
    2_000_000: "два миллиона",
    5_000_000: "пять миллионов",
    12_000_000: "двенадцать миллионов",
    1_001_000: "один миллион одна тысяча",
}

SPANISH = {
    1: "uno",
    16: "dieciséis",
    21: "veintiuno",
    22: "veintidós",
    31: "treinta y uno",
    100: "cien",
    121: "ciento veintiuno",
    500: "quinientos",
    1000: "mil",
    1100: "mil cien",
    21_000: "veintiún mil",
    31_000: "treinta y un mil",
    1_000_000: "un millón",
    2_000_000: "dos millones",
    100_000_000: "cien millones",
}

FRENCH = {
    1: "un",
    17: "dix-sept",
    21: "vingt-et-un",
    70: "soixante-dix",
    71: "soixante-et-onze",
    72: "soixante-douze",
    80: "quatre-vingts",
    81: "quatre-vingt-un",
    91: "quatre-vingt-onze",
    99: "quatre-vingt-dix-neuf",
    200: "deux cents",
    201: "deux cent un",
    1000: "mille",
    2000: "deux mille",
    80_000: "quatre-vingt mille",
    200_000: "deux cent mille",
    1_000_000: "un million",
    2_000_000: "deux millions",
}

INDONESIAN = {
    11: "sebelas",
    12: "dua belas",
    21: "dua puluh satu",
    100: "seratus",
    250: "dua ratus lima puluh",
    1000: "seribu",
    1100: "seribu seratus",
    2000: "dua ribu",
    1_000_000: "satu juta",
}

ITALIAN = {
    1: "uno",
    21: "ventuno",
    23: "ventitré",
    28: "ventotto",
    100: "cento",
    103: "centotré",
    1000: "mille",
    2000: "duemila",
    23_000: "ventitremila",
    1234: "milleduecentotrentaquattro",
    1_000_000: "un milione",
    1_000_001: "un milione e uno",
    2_000_000: "due milioni",
}

DUTCH = {
    21: "eenentwintig",
    22: "tweeëntwintig",
    23: "drieëntwintig",
    34: "vierendertig",
    100: "honderd",
    200: "tweehonderd",
    1000: "duizend",
    2000: "tweeduizend",
    1234: "duizend tweehonderd vierendertig",
    1_000_000: "een miljoen",
}

PORTUGUESE_BR = {
    14: "quatorze",
    16: "dezesseis",
    100: "cem",
    101: "cento e um",
    234: "duzentos e trinta e quatro",
    1000: "mil",
    1001: "mil e um",
    1100: "mil e cem",
    1234: "mil duzentos e trinta e quatro",
    2000: "dois mil",
    1_000_000: "um milhão",
    2_000_000: "dois milhões",
    1_001_000: "um milhão e mil",
    1_200_000: "um milhão e duzentos mil",
    1_234_000: "um milhão duzentos e trinta e quatro mil",
    2_345_678: "dois milhões trezentos e quarenta e cinco mil seiscentos e setenta e oito",
}

PORTUGUESE_PT = {
    14: "catorze",
    16: "dezasseis",
    17: "dezassete",
    19: "dezanove",
    100: "cem",
    101: "cento e um",
    1001: "mil e um",
}

ARABIC = {
    21: "واحد وعشرون",
    100: "مائة",
    200: "مائتان",
    1000: "ألف",
    2000: "ألفان",
    3000: "ثلاثة آلاف",
    1_000_000: "مليون",
    2_000_000: "مليونان",
}

CZECH = {
    2: "dvě",
    22: "dvacetdva",
    123: "stodvacettři",
    1000: "jedentisíc",
    2000: "dvatisíce",
    5000: "pěttisíc",
    20_000: "dvacettisíc",
    1_000_000: "jedenmilión",
    9_000_000: "devětmiliónů",
}


class TestLocaleWords:
    @pytest.mark.parametrize(
        "locale_id,number,expected",
        _cases("en_US", ENGLISH.items())
        + _cases("de_DE", GERMAN.items())
        + _cases("ru_RU", RUSSIAN.items())
        + _cases("es_ES", SPANISH.items())
        + _cases("fr_FR", FRENCH.items())
        + _cases("id_ID", INDONESIAN.items())
        + _cases("it_IT", ITALIAN.items())
        + _cases("nl_NL", DUTCH.items())
        + _cases("pt_BR", PORTUGUESE_BR.items())
        + _cases("pt_PT", PORTUGUESE_PT.items())
        + _cases("ar_AR", ARABIC.items())
        + _cases("cs_CZ", CZECH.items()),
    )
    def test_words(self, locale_id, number, expected):
        assert words(locale_id, number) == expected


class TestRussianAgreement:
    """Magnitude nouns follow the last two digits of their count."""

    @pytest.fixture
    def engine(self):
        return get_engine("ru_RU")

    @pytest.mark.parametrize("value", [11, 12, 13, 14, 111, 112, 514])
    def test_teens_take_genitive_plural(self, engine, value):
        assert engine._genitive_plural_threshold(value)
        assert engine._grammatical_number(value) == "genitive_plural"

    @pytest.mark.parametrize("value,form", [(1, "singular"), (21, "singular"), (3, "paucal"), (44, "paucal"), (5, "genitive_plural"), (20, "genitive_plural")])
    def test_last_digit(self, engine, value, form):
        assert engine._grammatical_number(value) == form

    def test_feminine_thousands_only(self, engine):
        assert engine._ones(1, "feminine") == "одна"
        assert engine._ones(2, "feminine") == "две"
        assert engine._ones(3, "feminine") == "три"
        assert engine._ones(1, "masculine") == "один"


class TestLeadingUnitElision:
    @pytest.mark.parametrize("locale_id", ["es_ES", "pt_BR", "pt_PT"])
    def test_only_lone_thousand(self, locale_id):
        engine = get_engine(locale_id)
        assert engine._leading_unit_elision(Trio(value=1, index=1, count=2))
        assert not engine._leading_unit_elision(Trio(value=2, index=1, count=2))
        assert not engine._leading_unit_elision(Trio(value=1, index=2, count=3))


class TestPortugueseGroupConnector:
    """"e" only before the last non-empty group, and only if below a hundred or round."""

    @pytest.fixture
    def engine(self):
        return get_engine("pt_BR")

    @pytest.mark.parametrize("value", [1, 99, 100, 200, 900])
    def test_connected(self, engine, value):
        assert engine._needs_group_connector(Trio(value=value, index=1, count=3))

    @pytest.mark.parametrize("value", [101, 234, 999])
    def test_hundreds_with_remainder_not_connected(self, engine, value):
        assert not engine._needs_group_connector(Trio(value=value, index=1, count=3))

    def test_not_connected_when_lower_group_follows(self, engine):
        assert not engine._needs_group_connector(Trio(value=5, index=1, count=3, lower_present=True))

    def test_top_group_not_connected(self, engine):
        assert not engine._needs_group_connector(Trio(value=5, index=2, count=3))
