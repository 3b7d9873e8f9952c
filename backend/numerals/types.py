"""Shared type definitions for locale engines."""
from typing import Literal

Gender = Literal["masculine", "feminine"]

# Russian-style count agreement: 1 → singular, 2-4 → paucal, else genitive plural
GrammaticalNumber = Literal["singular", "paucal", "genitive_plural"]
