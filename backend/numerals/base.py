"""Abstract base class for locale grammar engines."""
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from core.errors import AppError, Err, Ok, Result
from core.logging import engine_logger
from .errors import CapacityExceededError, NotAnIntegerError, NumeralError
from .tokenizer import DEFAULT_GROUP_WIDTH, join_tokens, tokenize

log = engine_logger()


@dataclass(frozen=True, slots=True)
class LocaleDictionary:
    """Static word fragments for one locale.

    Sequences are indexed by digit value. ``radix`` holds the magnitude
    words per group position, each as a tuple of inflected forms.
    Locale-specific forms (gender, elision, fused words) live in ``variants``.
    """
    zero: str
    ones: tuple[str, ...]
    teens: tuple[str, ...]
    tens: tuple[str, ...]
    hundred: str = ""
    hundreds: tuple[str, ...] = ()
    radix: tuple[tuple[str, ...], ...] = ((), (), ())
    delimiters: tuple[str, ...] = ()
    variants: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "variants", MappingProxyType(dict(self.variants)))

    def variant(self, name: str, index: int) -> str:
        return self.variants[name][index]


@dataclass(frozen=True, slots=True)
class Trio:
    """One digit group in its position within the whole number.

    ``is_present`` answers "is the group non-zero", ``has_tens_place`` and
    ``has_hundreds_place`` answer "does the group have that many digits".
    """
    value: int
    index: int = 0
    count: int = 1
    lower_present: bool = False
    ones: int = field(init=False)
    tens: int = field(init=False)
    hundreds: int = field(init=False)

    def __post_init__(self):
        digits = tokenize(self.value, 1) + [0, 0]
        object.__setattr__(self, "ones", digits[0])
        object.__setattr__(self, "tens", digits[1])
        object.__setattr__(self, "hundreds", digits[2])

    @property
    def is_present(self) -> bool:
        return self.value > 0

    @property
    def has_tens_place(self) -> bool:
        return self.value >= 10

    @property
    def has_hundreds_place(self) -> bool:
        return self.value >= 100

    @property
    def below_hundred(self) -> int:
        """Value of the tens and ones digits together."""
        return self.value % 100

    @property
    def has_higher(self) -> bool:
        """Whether a more significant group follows this one."""
        return self.index + 1 < self.count


class NumeralEngine(ABC):
    """Abstract base for locale-specific number-to-words conversion.

    Subclasses provide a ``DICTIONARY`` and ``render_trio``; the base class
    owns tokenizing, the capacity check, the zero special case and joining.
    Engines carry no per-call state, so one instance serves every caller.
    """

    DICTIONARY: LocaleDictionary
    GROUP_WIDTH: int = DEFAULT_GROUP_WIDTH
    MAX_DIGITS: int = 9
    SEPARATOR: str = ""

    @property
    @abstractmethod
    def locale_id(self) -> str:
        """Locale identifier (e.g., 'en_US', 'pt_BR')."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable language name."""
        ...

    @property
    @abstractmethod
    def native_name(self) -> str:
        """Language name in the language itself."""
        ...

    @property
    def group_width(self) -> int:
        return self.GROUP_WIDTH

    @property
    def max_digits(self) -> int:
        return self.MAX_DIGITS

    @property
    def zero_word(self) -> str:
        return self.DICTIONARY.zero

    @abstractmethod
    def render_trio(self, trio: Trio) -> str:
        """Render one digit group, including its magnitude word."""
        ...

    def to_words(self, number: int) -> str:
        """Translate a number to words.

        Raises:
            NotAnIntegerError: ``number`` is not a non-negative integer.
            CapacityExceededError: ``number`` has more digit groups than
                the locale supports.
        """
        try:
            tokens = tokenize(number, self.group_width)
        except NotAnIntegerError:
            log.info("numerals_rejected", locale=self.locale_id, reason="not_an_integer", value=repr(number))
            raise

        digits_required = len(tokens) * self.group_width
        if digits_required > self.max_digits:
            log.info(
                "numerals_rejected",
                locale=self.locale_id,
                reason="capacity_exceeded",
                digits_required=digits_required,
                max_digits=self.max_digits,
            )
            raise CapacityExceededError(join_tokens(tokens, self.group_width), self.locale_id, self.max_digits, digits_required)

        if tokens == [0]:
            return self.zero_word

        words: list[str] = []
        count = len(tokens)
        for index, value in enumerate(tokens):
            trio = Trio(
                value=value,
                index=index,
                count=count,
                lower_present=any(token > 0 for token in tokens[:index]),
            )
            words.insert(0, self.render_trio(trio))

        result = self.join(words)
        log.debug("numerals_rendered", locale=self.locale_id, groups=count)
        return result

    def to_words_result(self, number: int) -> Result[str, AppError]:
        """Translate with Result type for typed error handling."""
        try:
            return Ok(self.to_words(number))
        except NumeralError as e:
            return Err(e.error)

    def join(self, words: list[str]) -> str:
        """Join rendered groups, most significant first."""
        return self.SEPARATOR.join(word for word in words if word).strip()

    def info(self) -> dict:
        """Locale metadata for API responses."""
        return {
            "id": self.locale_id,
            "name": self.name,
            "nativeName": self.native_name,
            "groupWidth": self.group_width,
            "maxDigits": self.max_digits,
        }
