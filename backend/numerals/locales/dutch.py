"""Dutch (nl_NL) number words."""
from ..base import LocaleDictionary, NumeralEngine, Trio

DICTIONARY = LocaleDictionary(
    zero="nul",
    ones=("", "een", "twee", "drie", "vier", "vijf", "zes", "zeven", "acht", "negen"),
    teens=("tien", "elf", "twaalf", "dertien", "veertien", "vijftien", "zestien", "zeventien", "achttien", "negentien"),
    tens=("", "", "twintig", "dertig", "veertig", "vijftig", "zestig", "zeventig", "tachtig", "negentig"),
    hundred="honderd",
    radix=((), ("duizend",), ("miljoen",)),
    delimiters=(" ", "en", "ën"),
)


class DutchEngine(NumeralEngine):
    """Dutch engine.

    Ones precede tens ("vierendertig"); a one ending in "e" takes a trema
    on the joining "en" ("tweeëntwintig"). Hundreds are fused with their
    multiplier and "duizend" with its group.
    """

    DICTIONARY = DICTIONARY
    SEPARATOR = DICTIONARY.delimiters[0]

    @property
    def locale_id(self) -> str:
        return "nl_NL"

    @property
    def name(self) -> str:
        return "Dutch"

    @property
    def native_name(self) -> str:
        return "Nederlands"

    def render_trio(self, trio: Trio) -> str:
        if not trio.is_present:
            return ""
        d = self.DICTIONARY
        if trio.index == 1 and trio.value == 1:
            return d.radix[1][0]

        words = self.SEPARATOR.join(
            part for part in (self._hundreds(trio), self._tens_and_ones(trio)) if part
        )
        if trio.index == 1:
            return words + d.radix[1][0]
        if trio.index >= 2:
            return words + self.SEPARATOR + d.radix[trio.index][0]
        return words

    def _hundreds(self, trio: Trio) -> str:
        d = self.DICTIONARY
        if not trio.hundreds:
            return ""
        if trio.hundreds == 1:
            return d.hundred
        return d.ones[trio.hundreds] + d.hundred

    def _tens_and_ones(self, trio: Trio) -> str:
        d = self.DICTIONARY
        if trio.tens == 1:
            return d.teens[trio.ones]
        if trio.tens >= 2 and trio.ones:
            return d.ones[trio.ones] + self._conjunction(trio.ones) + d.tens[trio.tens]
        if trio.tens >= 2:
            return d.tens[trio.tens]
        return d.ones[trio.ones]

    def _conjunction(self, ones: int) -> str:
        if self.DICTIONARY.ones[ones].endswith("e"):
            return self.DICTIONARY.delimiters[2]
        return self.DICTIONARY.delimiters[1]
