"""Arabic (ar_AR) number words."""
from ..base import LocaleDictionary, NumeralEngine, Trio

DICTIONARY = LocaleDictionary(
    zero="صفر",
    ones=("", "واحد", "اثنان", "ثلاثة", "أربعة", "خمسة", "ستة", "سبعة", "ثمانية", "تسعة"),
    teens=(
        "عشرة", "أحد عشر", "اثنا عشر", "ثلاثة عشر", "أربعة عشر",
        "خمسة عشر", "ستة عشر", "سبعة عشر", "ثمانية عشر", "تسعة عشر",
    ),
    tens=("", "", "عشرون", "ثلاثون", "أربعون", "خمسون", "ستون", "سبعون", "ثمانون", "تسعون"),
    hundreds=(
        "", "مائة", "مائتان", "ثلاثمائة", "أربعمائة",
        "خمسمائة", "ستمائة", "سبعمائة", "ثمانمائة", "تسعمائة",
    ),
    # singular, dual, plural
    radix=((), ("ألف", "ألفان", "آلاف"), ("مليون", "مليونان", "ملايين")),
    delimiters=("و",),
)


class ArabicEngine(NumeralEngine):
    """Arabic engine.

    Ones precede tens ("أربعة وثلاثون"), and every part is joined with "و".
    A magnitude counted once or twice is named alone (ألف, ألفان); three
    to ten take the plural form after the count, larger counts the singular.
    """

    DICTIONARY = DICTIONARY
    SEPARATOR = " " + DICTIONARY.delimiters[0]

    @property
    def locale_id(self) -> str:
        return "ar_AR"

    @property
    def name(self) -> str:
        return "Arabic"

    @property
    def native_name(self) -> str:
        return "العربية"

    def render_trio(self, trio: Trio) -> str:
        if not trio.is_present:
            return ""

        if trio.index > 0 and trio.value <= 2:
            return self.DICTIONARY.radix[trio.index][trio.value - 1]

        words = self.SEPARATOR.join(
            part for part in (self.DICTIONARY.hundreds[trio.hundreds], self._tens_and_ones(trio)) if part
        )
        if trio.index == 0:
            return words
        return f"{words} {self._radix_form(trio)}"

    def _tens_and_ones(self, trio: Trio) -> str:
        d = self.DICTIONARY
        if trio.tens == 1:
            return d.teens[trio.ones]
        if trio.tens >= 2 and trio.ones:
            return f"{d.ones[trio.ones]} {d.delimiters[0]}{d.tens[trio.tens]}"
        if trio.tens >= 2:
            return d.tens[trio.tens]
        return d.ones[trio.ones]

    def _radix_form(self, trio: Trio) -> str:
        """Plural after three to ten, singular otherwise."""
        forms = self.DICTIONARY.radix[trio.index]
        return forms[2] if 3 <= trio.value <= 10 else forms[0]
