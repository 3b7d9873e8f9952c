"""Indonesian (id_ID) number words."""
from ..base import LocaleDictionary, NumeralEngine, Trio

DICTIONARY = LocaleDictionary(
    zero="nol",
    ones=("", "satu", "dua", "tiga", "empat", "lima", "enam", "tujuh", "delapan", "sembilan"),
    teens=(
        "sepuluh", "sebelas", "dua belas", "tiga belas", "empat belas",
        "lima belas", "enam belas", "tujuh belas", "delapan belas", "sembilan belas",
    ),
    tens=(
        "", "", "dua puluh", "tiga puluh", "empat puluh",
        "lima puluh", "enam puluh", "tujuh puluh", "delapan puluh", "sembilan puluh",
    ),
    hundred="ratus",
    radix=((), ("ribu",), ("juta",)),
    delimiters=(" ", "se"),
)


class IndonesianEngine(NumeralEngine):
    """Indonesian engine.

    "One" fuses with hundred and thousand as the prefix "se" (seratus,
    seribu); everything else is space separated.
    """

    DICTIONARY = DICTIONARY
    SEPARATOR = DICTIONARY.delimiters[0]

    @property
    def locale_id(self) -> str:
        return "id_ID"

    @property
    def name(self) -> str:
        return "Indonesian"

    @property
    def native_name(self) -> str:
        return "Bahasa Indonesia"

    def render_trio(self, trio: Trio) -> str:
        if not trio.is_present:
            return ""
        d = self.DICTIONARY
        if trio.index == 1 and trio.value == 1:
            return d.delimiters[1] + d.radix[1][0]

        words = [word for word in (self._hundreds(trio), self._tens_and_ones(trio)) if word]
        if trio.index > 0:
            words.append(d.radix[trio.index][0])
        return self.SEPARATOR.join(words)

    def _hundreds(self, trio: Trio) -> str:
        d = self.DICTIONARY
        if not trio.hundreds:
            return ""
        if trio.hundreds == 1:
            return d.delimiters[1] + d.hundred
        return f"{d.ones[trio.hundreds]} {d.hundred}"

    def _tens_and_ones(self, trio: Trio) -> str:
        d = self.DICTIONARY
        if trio.tens == 1:
            return d.teens[trio.ones]
        if trio.tens >= 2 and trio.ones:
            return d.tens[trio.tens] + d.delimiters[0] + d.ones[trio.ones]
        if trio.tens >= 2:
            return d.tens[trio.tens]
        return d.ones[trio.ones]
