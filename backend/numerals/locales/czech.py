"""Czech (cs_CZ) number words. Words are written fused, without spaces."""
from ..base import LocaleDictionary, NumeralEngine, Trio

DICTIONARY = LocaleDictionary(
    zero="nula",
    ones=("", "jedna", "dva", "tři", "čtyři", "pět", "šest", "sedm", "osm", "devět"),
    teens=(
        "deset", "jedenáct", "dvanáct", "třináct", "čtrnáct",
        "patnáct", "šestnáct", "sedmnáct", "osmnáct", "devatenáct",
    ),
    tens=("", "", "dvacet", "třicet", "čtyřicet", "padesát", "šedesát", "sedmdesát", "osmdesát", "devadesát"),
    hundreds=("", "sto", "dvěstě", "třista", "čtyřista", "pětset", "šestset", "sedmset", "osmset", "devětset"),
    radix=((), ("tisíc",), ("miliónů",)),
    variants={
        # single-digit magnitude groups, indexed by the digit
        "thousands": (
            "", "jedentisíc", "dvatisíce", "třitisíce", "čtyřitisíce",
            "pěttisíc", "šesttisíc", "sedmtisíc", "osmtisíc", "devěttisíc",
        ),
        "millions": (
            "", "jedenmilión", "dvamilióny", "třimilióny", "čtyřimilióny",
            "pětmiliónů", "šestmiliónů", "sedmmiliónů", "osmmiliónů", "devětmiliónů",
        ),
        "feminine_two": ("dvě",),
    },
)

MAGNITUDE_VARIANTS = {1: "thousands", 2: "millions"}


class CzechEngine(NumeralEngine):
    DICTIONARY = DICTIONARY

    @property
    def locale_id(self) -> str:
        return "cs_CZ"

    @property
    def name(self) -> str:
        return "Czech"

    @property
    def native_name(self) -> str:
        return "Čeština"

    def render_trio(self, trio: Trio) -> str:
        d = self.DICTIONARY
        if trio.index > 0 and not trio.has_tens_place:
            return d.variant(MAGNITUDE_VARIANTS[trio.index], trio.ones)

        if trio.tens == 1:
            rest = d.teens[trio.ones]
        elif trio.tens >= 2:
            rest = d.tens[trio.tens] + d.ones[trio.ones]
        elif trio.index == 0 and trio.value == 2:
            rest = d.variant("feminine_two", 0)
        else:
            rest = d.ones[trio.ones]

        radix = d.radix[trio.index][0] if trio.index > 0 else ""
        return d.hundreds[trio.hundreds] + rest + radix
