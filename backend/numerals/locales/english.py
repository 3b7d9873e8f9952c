"""English (en_US) number words."""
from ..base import LocaleDictionary, NumeralEngine, Trio

DICTIONARY = LocaleDictionary(
    zero="zero",
    ones=("", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine"),
    teens=("ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen", "seventeen", "eighteen", "nineteen"),
    tens=("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"),
    hundred="hundred",
    radix=((), ("thousand",), ("million",)),
    delimiters=("-", "and"),
)


class EnglishEngine(NumeralEngine):
    """English engine.

    "and" follows "hundred" when tens or ones follow it, and joins a
    final sub-hundred group to the groups above it: 1005 → "one thousand
    and five".
    """

    DICTIONARY = DICTIONARY

    @property
    def locale_id(self) -> str:
        return "en_US"

    @property
    def name(self) -> str:
        return "English"

    @property
    def native_name(self) -> str:
        return "English"

    def render_trio(self, trio: Trio) -> str:
        conjunction = self.DICTIONARY.delimiters[1]
        hundred = self._hundreds(trio)

        if trio.has_higher and trio.is_present:
            if trio.index == 0 and not trio.hundreds:
                hundred = f" {conjunction} "
            else:
                hundred = " " + hundred

        return hundred + self._tens_and_ones(trio) + self._radix(trio)

    def _hundreds(self, trio: Trio) -> str:
        if not trio.hundreds:
            return ""
        words = f"{self.DICTIONARY.ones[trio.hundreds]} {self.DICTIONARY.hundred}"
        if trio.below_hundred:
            words += f" {self.DICTIONARY.delimiters[1]} "
        return words

    def _tens_and_ones(self, trio: Trio) -> str:
        d = self.DICTIONARY
        if trio.tens == 1:
            return d.teens[trio.ones]
        if trio.tens >= 2:
            if trio.ones:
                return d.tens[trio.tens] + d.delimiters[0] + d.ones[trio.ones]
            return d.tens[trio.tens]
        return d.ones[trio.ones]

    def _radix(self, trio: Trio) -> str:
        if trio.index > 0 and trio.is_present:
            return " " + self.DICTIONARY.radix[trio.index][0]
        return ""
