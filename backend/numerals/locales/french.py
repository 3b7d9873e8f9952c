"""French (fr_FR) number words, traditional hyphenation."""
from ..base import LocaleDictionary, NumeralEngine, Trio

DICTIONARY = LocaleDictionary(
    zero="zéro",
    ones=("", "un", "deux", "trois", "quatre", "cinq", "six", "sept", "huit", "neuf"),
    teens=("dix", "onze", "douze", "treize", "quatorze", "quinze", "seize", "dix-sept", "dix-huit", "dix-neuf"),
    # 70-79 and 90-99 continue counting from the previous ten with teens
    tens=("", "", "vingt", "trente", "quarante", "cinquante", "soixante", "soixante", "quatre-vingt", "quatre-vingt"),
    hundred="cent",
    radix=((), ("mille",), ("million",)),
    delimiters=("-", "et", "-et-"),
)

TEENS_BASED_TENS = (7, 9)


class FrenchEngine(NumeralEngine):
    """French engine.

    "et" joins a one to its ten (vingt-et-un, soixante-et-onze) except
    after quatre-vingt. "cents" and "quatre-vingts" take a plural s when
    nothing follows them within the group and they do not precede "mille".
    """

    DICTIONARY = DICTIONARY
    SEPARATOR = " "

    @property
    def locale_id(self) -> str:
        return "fr_FR"

    @property
    def name(self) -> str:
        return "French"

    @property
    def native_name(self) -> str:
        return "Français"

    def render_trio(self, trio: Trio) -> str:
        if not trio.is_present:
            return ""
        if trio.index == 1 and trio.value == 1:
            return self.DICTIONARY.radix[1][0]

        words = [word for word in (self._hundreds(trio), self._tens_and_ones(trio)) if word]
        if trio.index > 0:
            words.append(self._radix(trio))
        return self.SEPARATOR.join(words)

    def _takes_plural_s(self, trio: Trio) -> bool:
        return trio.index != 1

    def _hundreds(self, trio: Trio) -> str:
        d = self.DICTIONARY
        if not trio.hundreds:
            return ""
        if trio.hundreds == 1:
            return d.hundred
        words = f"{d.ones[trio.hundreds]} {d.hundred}"
        if not trio.below_hundred and self._takes_plural_s(trio):
            words += "s"
        return words

    def _tens_and_ones(self, trio: Trio) -> str:
        d = self.DICTIONARY
        tens, ones = trio.tens, trio.ones
        if tens == 0:
            return d.ones[ones]
        if tens == 1:
            return d.teens[ones]
        if tens in TEENS_BASED_TENS:
            joiner = d.delimiters[2] if tens == 7 and ones == 1 else d.delimiters[0]
            return d.tens[tens] + joiner + d.teens[ones]
        if ones == 0:
            if tens == 8 and self._takes_plural_s(trio):
                return d.tens[tens] + "s"
            return d.tens[tens]
        joiner = d.delimiters[2] if ones == 1 and tens != 8 else d.delimiters[0]
        return d.tens[tens] + joiner + d.ones[ones]

    def _radix(self, trio: Trio) -> str:
        word = self.DICTIONARY.radix[trio.index][0]
        if trio.index >= 2 and trio.value > 1:
            return word + "s"
        return word
