"""Spanish (es_ES) number words."""
import unicodedata

from ..base import LocaleDictionary, NumeralEngine, Trio

DICTIONARY = LocaleDictionary(
    zero="cero",
    ones=("", "uno", "dos", "tres", "cuatro", "cinco", "seis", "siete", "ocho", "nueve"),
    teens=(
        "diez", "once", "doce", "trece", "catorce",
        "quince", "dieciséis", "diecisiete", "dieciocho", "diecinueve",
    ),
    tens=("", "", "veinte", "treinta", "cuarenta", "cincuenta", "sesenta", "setenta", "ochenta", "noventa"),
    hundreds=(
        "", "ciento", "doscientos", "trescientos", "cuatrocientos",
        "quinientos", "seiscientos", "setecientos", "ochocientos", "novecientos",
    ),
    radix=((), ("mil",), ("millón",)),
    delimiters=(" ", " y "),
    variants={
        "hundred_exact": ("cien",),
        "twenties": (
            "", "veintiuno", "veintidós", "veintitrés", "veinticuatro",
            "veinticinco", "veintiséis", "veintisiete", "veintiocho", "veintinueve",
        ),
        # shortened "one" before a magnitude word
        "apocope": ("un", "veintiún"),
    },
)


def strip_diacritics(text: str) -> str:
    """Remove combining accents: "millónes" → "millones"."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


class SpanishEngine(NumeralEngine):
    DICTIONARY = DICTIONARY
    SEPARATOR = DICTIONARY.delimiters[0]

    @property
    def locale_id(self) -> str:
        return "es_ES"

    @property
    def name(self) -> str:
        return "Spanish"

    @property
    def native_name(self) -> str:
        return "Español"

    def render_trio(self, trio: Trio) -> str:
        if not trio.is_present:
            return ""
        if self._leading_unit_elision(trio):
            return self.DICTIONARY.radix[trio.index][0]

        words = [word for word in (self._hundreds(trio), self._tens_and_ones(trio)) if word]
        if trio.index > 0:
            words.append(self._radix(trio))
        return self.SEPARATOR.join(words)

    def _leading_unit_elision(self, trio: Trio) -> bool:
        """A thousand is "mil", never "un mil"."""
        return trio.index == 1 and trio.value == 1

    def _hundreds(self, trio: Trio) -> str:
        if trio.hundreds == 1 and not trio.below_hundred:
            return self.DICTIONARY.variant("hundred_exact", 0)
        return self.DICTIONARY.hundreds[trio.hundreds]

    def _tens_and_ones(self, trio: Trio) -> str:
        d = self.DICTIONARY
        if trio.tens == 1:
            return d.teens[trio.ones]
        if trio.tens == 2 and trio.ones:
            if trio.ones == 1 and trio.index > 0:
                return d.variant("apocope", 1)
            return d.variant("twenties", trio.ones)
        if trio.tens >= 2 and trio.ones:
            return d.tens[trio.tens] + d.delimiters[1] + self._unit(trio)
        if trio.tens >= 2:
            return d.tens[trio.tens]
        return self._unit(trio)

    def _unit(self, trio: Trio) -> str:
        if trio.ones == 1 and trio.index > 0:
            return self.DICTIONARY.variant("apocope", 0)
        return self.DICTIONARY.ones[trio.ones]

    def _radix(self, trio: Trio) -> str:
        word = self.DICTIONARY.radix[trio.index][0]
        if trio.index >= 2 and trio.value > 1:
            return strip_diacritics(word + "es")
        return word
