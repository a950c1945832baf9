from typing import NamedTuple

from passcraft.charsets import SYMBOLS

# (lower bound, label), highest first
LABELS = (
    (80, "Very Strong"),
    (60, "Strong"),
    (40, "Medium"),
    (20, "Weak"),
    (0, "Very Weak"),
)


class StrengthScore(NamedTuple):
    score: int
    label: str


def label_for_score(score: int) -> str:
    for floor, label in LABELS:
        if score >= floor:
            return label
    return "Very Weak"


def score_password(password: str) -> StrengthScore:
    """
    Scores the strength of a password on a scale of 0–100 and returns both score and label.
    """
    length = len(password)

    # short passwords never reach the variety bonuses
    if length < 8:
        score = max(length * 5, 0)
        return StrengthScore(score, label_for_score(score))

    # --- Length (up to 40) ---
    score = min(length * 3, 40)

    # --- Character variety (up to 30); lowercase earns nothing ---
    has_upper = any("A" <= c <= "Z" for c in password)
    has_number = any("0" <= c <= "9" for c in password)
    has_symbol = any(c in SYMBOLS for c in password)
    types_count = sum((has_upper, has_number, has_symbol))
    score += types_count * 10

    # --- Mix bonuses, additive ---
    if types_count >= 2 and length >= 10:
        score += 15
    if types_count == 3 and length >= 12:
        score += 15

    score = min(score, 100)
    return StrengthScore(score, label_for_score(score))


if __name__ == "__main__":
    # For quick testing
    pwd = input("Enter password to test: ")
    result = score_password(pwd)
    print(f"Password Strength: {result.label} (Score: {result.score}/100)")
