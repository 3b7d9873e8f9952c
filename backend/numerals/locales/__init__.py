"""Locale grammar engines, one module per language."""
from .arabic import ArabicEngine
from .czech import CzechEngine
from .dutch import DutchEngine
from .english import EnglishEngine
from .french import FrenchEngine
from .german import GermanEngine
from .indonesian import IndonesianEngine
from .italian import ItalianEngine
from .portuguese import BrazilianPortugueseEngine, EuropeanPortugueseEngine
from .russian import RussianEngine
from .spanish import SpanishEngine

ALL_ENGINES = [
    ArabicEngine,
    CzechEngine,
    GermanEngine,
    EnglishEngine,
    SpanishEngine,
    FrenchEngine,
    IndonesianEngine,
    ItalianEngine,
    DutchEngine,
    BrazilianPortugueseEngine,
    EuropeanPortugueseEngine,
    RussianEngine,
]

__all__ = [
    "ALL_ENGINES",
    "ArabicEngine",
    "BrazilianPortugueseEngine",
    "CzechEngine",
    "DutchEngine",
    "EnglishEngine",
    "EuropeanPortugueseEngine",
    "FrenchEngine",
    "GermanEngine",
    "IndonesianEngine",
    "ItalianEngine",
    "RussianEngine",
    "SpanishEngine",
]
