"""Portuguese number words, Brazilian (pt_BR) and European (pt_PT)."""
from dataclasses import replace

from ..base import LocaleDictionary, NumeralEngine, Trio

DICTIONARY = LocaleDictionary(
    zero="zero",
    ones=("", "um", "dois", "três", "quatro", "cinco", "seis", "sete", "oito", "nove"),
    teens=("dez", "onze", "doze", "treze", "quatorze", "quinze", "dezesseis", "dezessete", "dezoito", "dezenove"),
    tens=("", "", "vinte", "trinta", "quarenta", "cinquenta", "sessenta", "setenta", "oitenta", "noventa"),
    hundreds=(
        "", "cento", "duzentos", "trezentos", "quatrocentos",
        "quinhentos", "seiscentos", "setecentos", "oitocentos", "novecentos",
    ),
    # singular, plural
    radix=((), ("mil",), ("milhão", "milhões")),
    delimiters=(" ", " e ", "e"),
    variants={"hundred_exact": ("cem",)},
)

EUROPEAN_DICTIONARY = replace(
    DICTIONARY,
    teens=("dez", "onze", "doze", "treze", "catorze", "quinze", "dezasseis", "dezassete", "dezoito", "dezanove"),
    variants=dict(DICTIONARY.variants),
)


class BrazilianPortugueseEngine(NumeralEngine):
    """Brazilian Portuguese engine.

    Hundreds, tens and ones within a group are joined with "e". Between
    groups "e" appears only before the last non-empty group, and only when
    that group is below a hundred or a round hundred ("mil e cem",
    "mil duzentos e trinta").
    """

    DICTIONARY = DICTIONARY
    SEPARATOR = DICTIONARY.delimiters[0]

    @property
    def locale_id(self) -> str:
        return "pt_BR"

    @property
    def name(self) -> str:
        return "Portuguese (Brazil)"

    @property
    def native_name(self) -> str:
        return "Português (Brasil)"

    def render_trio(self, trio: Trio) -> str:
        if not trio.is_present:
            return ""
        d = self.DICTIONARY

        if self._leading_unit_elision(trio):
            words = d.radix[1][0]
        else:
            words = d.delimiters[1].join(
                part for part in (self._hundreds(trio), self._tens_and_ones(trio)) if part
            )
            if trio.index > 0:
                words = words + self.SEPARATOR + self._radix(trio)

        if self._needs_group_connector(trio):
            return d.delimiters[2] + self.SEPARATOR + words
        return words

    def _leading_unit_elision(self, trio: Trio) -> bool:
        """A thousand is "mil", never "um mil"."""
        return trio.index == 1 and trio.value == 1

    def _needs_group_connector(self, trio: Trio) -> bool:
        if not trio.has_higher or trio.lower_present:
            return False
        return trio.value < 100 or trio.below_hundred == 0

    def _hundreds(self, trio: Trio) -> str:
        if trio.hundreds == 1 and not trio.below_hundred:
            return self.DICTIONARY.variant("hundred_exact", 0)
        return self.DICTIONARY.hundreds[trio.hundreds]

    def _tens_and_ones(self, trio: Trio) -> str:
        d = self.DICTIONARY
        if trio.tens == 1:
            return d.teens[trio.ones]
        if trio.tens >= 2 and trio.ones:
            return d.tens[trio.tens] + d.delimiters[1] + d.ones[trio.ones]
        if trio.tens >= 2:
            return d.tens[trio.tens]
        return d.ones[trio.ones]

    def _radix(self, trio: Trio) -> str:
        forms = self.DICTIONARY.radix[trio.index]
        if len(forms) > 1 and trio.value > 1:
            return forms[1]
        return forms[0]


class EuropeanPortugueseEngine(BrazilianPortugueseEngine):
    """European Portuguese: Brazilian grammar with European teen spellings."""

    DICTIONARY = EUROPEAN_DICTIONARY

    @property
    def locale_id(self) -> str:
        return "pt_PT"

    @property
    def name(self) -> str:
        return "Portuguese (Portugal)"

    @property
    def native_name(self) -> str:
        return "Português (Portugal)"
