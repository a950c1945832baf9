"""
passcraft.generator
Secure password generator using Python's secrets module.

Every password carries at least one character of each active class:
one mandatory draw per class, a uniform fill from the combined alphabet,
then a Fisher-Yates shuffle so the mandatory characters can land anywhere.
"""

import enum
import logging
from dataclasses import dataclass
from random import Random
from secrets import SystemRandom
from typing import FrozenSet, Optional

from .charsets import DIGITS, LOWERCASE, SYMBOLS, UPPERCASE

logger = logging.getLogger(__name__)

# os.urandom backed, no shared mutable state
_sysrand = SystemRandom()


class InvalidPolicy(ValueError):
    """Raised when a generation request cannot be satisfied."""


class CharacterClass(enum.Enum):
    # declaration order is the seed and alphabet order
    LOWERCASE = LOWERCASE
    UPPERCASE = UPPERCASE
    DIGIT = DIGITS
    SYMBOL = SYMBOLS

    @property
    def alphabet(self) -> str:
        return self.value


@dataclass(frozen=True)
class GenerationPolicy:
    length: int
    active_classes: FrozenSet[CharacterClass]

    def __post_init__(self):
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise InvalidPolicy(f"length must be an integer, got {self.length!r}")
        if self.length < 1:
            raise InvalidPolicy("length must be > 0")
        if CharacterClass.LOWERCASE not in self.active_classes:
            raise InvalidPolicy("lowercase is always an active class")
        if self.length < len(self.active_classes):
            raise InvalidPolicy(
                f"length {self.length} too small for {len(self.active_classes)} "
                "required character classes"
            )

    @classmethod
    def from_flags(
        cls,
        length: int,
        use_uppercase: bool = True,
        use_numbers: bool = True,
        use_symbols: bool = True,
    ) -> "GenerationPolicy":
        classes = {CharacterClass.LOWERCASE}
        if use_uppercase:
            classes.add(CharacterClass.UPPERCASE)
        if use_numbers:
            classes.add(CharacterClass.DIGIT)
        if use_symbols:
            classes.add(CharacterClass.SYMBOL)
        return cls(length=length, active_classes=frozenset(classes))

    def ordered_classes(self):
        return [c for c in CharacterClass if c in self.active_classes]


def allowed_alphabet(policy: GenerationPolicy) -> str:
    """Concatenate the active alphabets in lowercase, uppercase, digit, symbol order."""
    return "".join(c.alphabet for c in policy.ordered_classes())


def _shuffle(chars: list, rng: Random) -> None:
    # Fisher-Yates, drawing from the same source as the characters
    for i in range(len(chars) - 1, 0, -1):
        j = rng.randrange(i + 1)
        chars[i], chars[j] = chars[j], chars[i]


def generate_from_policy(policy: GenerationPolicy, rng: Optional[Random] = None) -> str:
    rng = rng or _sysrand
    password_chars = [rng.choice(c.alphabet) for c in policy.ordered_classes()]

    all_chars = allowed_alphabet(policy)
    for _ in range(policy.length - len(password_chars)):
        password_chars.append(rng.choice(all_chars))

    _shuffle(password_chars, rng)
    return "".join(password_chars)


def generate_password(
    length: int,
    use_uppercase: bool = True,
    use_numbers: bool = True,
    use_symbols: bool = True,
    rng: Optional[Random] = None,
) -> str:
    """
    Generate a cryptographically secure password.

    ``rng`` defaults to the OS-backed SystemRandom; pass a seeded
    ``random.Random`` only in tests. Raises InvalidPolicy when ``length``
    cannot seat one character per active class.
    """
    policy = GenerationPolicy.from_flags(length, use_uppercase, use_numbers, use_symbols)
    logger.debug(
        "generating password: length=%d classes=%s",
        policy.length,
        ",".join(c.name.lower() for c in policy.ordered_classes()),
    )
    return generate_from_policy(policy, rng)
