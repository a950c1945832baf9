"""passcraft: secure password generation and strength scoring."""

from .generator import (
    CharacterClass,
    GenerationPolicy,
    InvalidPolicy,
    allowed_alphabet,
    generate_password,
)
from .score import StrengthScore, label_for_score, score_password

__all__ = [
    "CharacterClass",
    "GenerationPolicy",
    "InvalidPolicy",
    "StrengthScore",
    "allowed_alphabet",
    "generate_password",
    "label_for_score",
    "score_password",
]
