"""German (de_DE) number words."""
from ..base import LocaleDictionary, NumeralEngine, Trio

DICTIONARY = LocaleDictionary(
    zero="null",
    ones=("", "ein", "zwei", "drei", "vier", "fünf", "sechs", "sieben", "acht", "neun"),
    teens=("zehn", "elf", "zwölf", "dreizehn", "vierzehn", "fünfzehn", "sechzehn", "siebzehn", "achtzehn", "neunzehn"),
    tens=("", "", "zwanzig", "dreißig", "vierzig", "fünfzig", "sechzig", "siebzig", "achtzig", "neunzig"),
    hundred="hundert",
    radix=((), ("tausend",), ("Million", "Millionen")),
    delimiters=("-", "und"),
    variants={
        # standalone "one": counting, feminine (before Million)
        "one": ("eins", "eine"),
    },
)


class GermanEngine(NumeralEngine):
    """German engine.

    Everything below a million is one word ("zweitausenddreihundertvier");
    Million/Millionen stand apart, separated by spaces.
    """

    DICTIONARY = DICTIONARY

    @property
    def locale_id(self) -> str:
        return "de_DE"

    @property
    def name(self) -> str:
        return "German"

    @property
    def native_name(self) -> str:
        return "Deutsch"

    def render_trio(self, trio: Trio) -> str:
        d = self.DICTIONARY
        hundred = d.ones[trio.hundreds] + d.hundred if trio.hundreds else ""

        ten = ""
        single = ""
        if trio.tens == 1:
            ten = d.teens[trio.ones]
        elif trio.tens >= 2:
            ten = d.tens[trio.tens]
            if trio.ones:
                ten = d.ones[trio.ones] + d.delimiters[1] + ten
        else:
            single = self._standalone_ones(trio)

        if trio.index >= 2:
            single += " "

        result = hundred + ten + single + self._radix(trio)
        if trio.index > 1 and trio.lower_present:
            result += " "
        return result

    def _standalone_ones(self, trio: Trio) -> str:
        """Counting form "eins", feminine "eine" before Million, else "ein"."""
        if trio.ones != 1:
            return self.DICTIONARY.ones[trio.ones]
        if trio.index == 0:
            return self.DICTIONARY.variant("one", 0)
        if trio.index >= 2 and not trio.has_tens_place:
            return self.DICTIONARY.variant("one", 1)
        return self.DICTIONARY.ones[1]

    def _radix(self, trio: Trio) -> str:
        if trio.index == 0 or not trio.is_present:
            return ""
        forms = self.DICTIONARY.radix[trio.index]
        if len(forms) == 1:
            return forms[0]
        return forms[0] if trio.value == 1 else forms[1]
