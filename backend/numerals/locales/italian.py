"""Italian (it_IT) number words."""
from ..base import LocaleDictionary, NumeralEngine, Trio

DICTIONARY = LocaleDictionary(
    zero="zero",
    ones=("", "uno", "due", "tre", "quattro", "cinque", "sei", "sette", "otto", "nove"),
    teens=(
        "dieci", "undici", "dodici", "tredici", "quattordici",
        "quindici", "sedici", "diciassette", "diciotto", "diciannove",
    ),
    tens=("", "", "venti", "trenta", "quaranta", "cinquanta", "sessanta", "settanta", "ottanta", "novanta"),
    hundred="cento",
    # singular, plural
    radix=((), ("mille", "mila"), ("milione", "milioni")),
    delimiters=(" ", " e "),
    variants={
        "one": ("un",),
        "final_three": ("tré",),
    },
)

# units starting with a vowel swallow the final vowel of the ten
ELIDING_UNITS = (1, 8)


class ItalianEngine(NumeralEngine):
    """Italian engine.

    Everything below a million is one word ("duemilatrecentoventuno");
    millions stand apart and are followed by "e" when more comes after.
    """

    DICTIONARY = DICTIONARY

    @property
    def locale_id(self) -> str:
        return "it_IT"

    @property
    def name(self) -> str:
        return "Italian"

    @property
    def native_name(self) -> str:
        return "Italiano"

    def render_trio(self, trio: Trio) -> str:
        if not trio.is_present:
            return ""
        d = self.DICTIONARY
        singular, plural = d.radix[trio.index] or ("", "")

        if trio.index == 1:
            if trio.value == 1:
                return singular
            return self._group_words(trio) + plural

        if trio.index >= 2:
            if trio.value == 1:
                words = d.variant("one", 0) + d.delimiters[0] + singular
            else:
                words = self._group_words(trio) + d.delimiters[0] + plural
            if trio.lower_present:
                words += d.delimiters[1]
            return words

        return self._group_words(trio)

    def _group_words(self, trio: Trio) -> str:
        d = self.DICTIONARY
        hundred = ""
        if trio.hundreds == 1:
            hundred = d.hundred
        elif trio.hundreds:
            hundred = d.ones[trio.hundreds] + d.hundred

        if trio.tens == 1:
            rest = d.teens[trio.ones]
        elif trio.tens >= 2:
            rest = self._tens(trio) + self._final_unit(trio)
        else:
            rest = self._final_unit(trio) if trio.hundreds else d.ones[trio.ones]
        return hundred + rest

    def _tens(self, trio: Trio) -> str:
        word = self.DICTIONARY.tens[trio.tens]
        if trio.ones in ELIDING_UNITS:
            return word[:-1]
        return word

    def _final_unit(self, trio: Trio) -> str:
        """Trailing "tre" of a compound is accented unless "mila" follows."""
        if trio.ones == 3 and trio.index != 1:
            return self.DICTIONARY.variant("final_three", 0)
        return self.DICTIONARY.ones[trio.ones]
