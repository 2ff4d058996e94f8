from typing import Iterable

SENTINEL = 1
BASE = 10

KEYPAD = {
    0: "e",
    1: "jnq",
    2: "rwx",
    3: "dsy",
    4: "ft",
    5: "am",
    6: "civ",
    7: "bku",
    8: "lop",
    9: "ghz",
}

LETTER_DIGITS = {letter: digit for digit, letters in KEYPAD.items() for letter in letters}


class InvalidCharacterError(ValueError):
    pass


def is_ascii_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def letter_to_digit(ch: str) -> int:
    """Map an ASCII letter (either case) to its keypad digit."""
    try:
        return LETTER_DIGITS[ch.lower()]
    except KeyError:
        raise InvalidCharacterError(f"No keypad digit for {ch!r}") from None


def fold_digits(digits: Iterable[int]) -> int:
    """
    Fold digits into a DigitValue: start from the sentinel and shift each digit in.
    The leading sentinel keeps leading zeros significant, so "04" and "4" differ.
    """
    value = SENTINEL
    for digit in digits:
        value = value * BASE + digit
    return value


def word_to_digit_value(word: str) -> int:
    """Digit value of a dictionary word. Non-letters (quotes, hyphens) are skipped."""
    return fold_digits(letter_to_digit(ch) for ch in word if is_ascii_letter(ch))


def digits_to_digit_value(digits: str) -> int:
    return fold_digits(int(d) for d in digits)


def digit_value_to_digits(value: int) -> str:
    """Inverse of the fold: the digit string without its sentinel."""
    if value < SENTINEL:
        raise ValueError(f"Not a digit value: {value}")
    return str(value)[1:]


def is_digit_token(token: str) -> bool:
    """A filler token is exactly one decimal digit."""
    return len(token) == 1 and token in "0123456789"
