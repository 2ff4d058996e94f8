import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, List, Optional, Tuple, TypeAlias

import structlog

from phone_encoder.dictionary import Dictionary
from phone_encoder.encoding import BASE, SENTINEL, is_digit_token

log = structlog.get_logger(__name__)

PartialSolution: TypeAlias = Tuple[str, ...]
EmitFn: TypeAlias = Callable[[str, PartialSolution], None]


class MalformedNumberError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class NumberEncodings:
    """All encodings found for one input number."""

    number: str
    digits: str
    solutions: Tuple[PartialSolution, ...] = field(default_factory=tuple)


def number_to_digits(number: str) -> str:
    """Keep the alphanumeric characters of a number; they must all be decimal digits."""
    digits = "".join(ch for ch in number if ch.isalnum())
    if digits and not (digits.isascii() and digits.isdigit()):
        raise MalformedNumberError(f"Number contains non-digit characters: {number!r}")
    return digits


def nth_digit(digits: str, i: int) -> int:
    assert 0 <= i < len(digits), f"digit index {i} out of range for {digits!r}"
    return ord(digits[i]) - ord("0")


@dataclass(slots=True)
class SearchFrame:
    """One position of the depth-first search: candidate words are digits[start:end]."""

    start: int
    words: PartialSolution
    end: int = -1
    value: int = SENTINEL
    found_word: bool = False
    matches: Tuple[str, ...] = ()
    match_index: int = 0

    def __post_init__(self):
        if self.end < 0:
            self.end = self.start


def iter_encodings(
    digits: str,
    dictionary: Dictionary,
    start: int = 0,
    words: PartialSolution = (),
) -> Iterator[PartialSolution]:
    """
    Yield every way to spell digits[start:] after the tokens already in `words`.

    Words starting at a position are tried shortest first, in dictionary order.
    Only when no word starts there may a single digit be used instead, and never
    right after another filler digit.

    The search is depth first over an explicit stack of frames, so the number
    of tokens is not limited by the interpreter's recursion limit.
    """
    stack = [SearchFrame(start=start, words=words)]
    while stack:
        frame = stack[-1]

        if frame.start >= len(digits):
            stack.pop()
            yield frame.words
            continue

        # Descend into the next word matching digits[start:end].
        if frame.match_index < len(frame.matches):
            word = frame.matches[frame.match_index]
            frame.match_index += 1
            stack.append(SearchFrame(start=frame.end, words=frame.words + (word,)))
            continue

        # Extend the candidate by one digit and look it up, up to the longest key.
        if frame.end < len(digits) and frame.end - frame.start < dictionary.max_digits:
            frame.value = frame.value * BASE + nth_digit(digits, frame.end)
            frame.end += 1
            frame.matches = dictionary.get(frame.value)
            frame.match_index = 0
            if frame.matches:
                frame.found_word = True
            continue

        stack.pop()
        if not frame.found_word and not (frame.words and is_digit_token(frame.words[-1])):
            filler = str(nth_digit(digits, frame.start))
            stack.append(SearchFrame(start=frame.start + 1, words=frame.words + (filler,)))


def encode(number: str, digits: str, dictionary: Dictionary, emit: EmitFn) -> int:
    """Search all encodings of one number, passing each to `emit`. Returns how many were found."""
    count = 0
    for solution in iter_encodings(digits, dictionary):
        emit(number, solution)
        count += 1
    return count


def encode_number(number: str, dictionary: Dictionary, emit: Optional[EmitFn] = None) -> NumberEncodings:
    digits = number_to_digits(number)
    solutions: List[PartialSolution] = []

    def collect(num: str, solution: PartialSolution) -> None:
        solutions.append(solution)
        if emit is not None:
            emit(num, solution)

    encode(number, digits, dictionary, collect)
    if not solutions:
        log.debug("no encoding found", number=number, digits=digits)
    return NumberEncodings(number=number, digits=digits, solutions=tuple(solutions))


def solve_numbers(
    numbers: Iterable[str],
    dictionary: Dictionary,
    emit: Optional[EmitFn] = None,
    on_number: Optional[Callable[[str], None]] = None,
) -> List[NumberEncodings]:
    """
    Encode every number in order. Malformed numbers are logged and skipped.
    `on_number` is called after each number, skipped or not.
    """
    results: List[NumberEncodings] = []
    skipped = 0
    started = time.perf_counter()

    for number in numbers:
        try:
            results.append(encode_number(number, dictionary, emit))
        except MalformedNumberError as e:
            skipped += 1
            log.warning("skipping number", number=number, error=str(e))
        if on_number is not None:
            on_number(number)

    log.debug(
        "batch finished",
        numbers=len(results),
        solutions=sum(len(r.solutions) for r in results),
        skipped=skipped,
        elapsed=round(time.perf_counter() - started, 3),
    )
    return results


def format_solution(number: str, words: PartialSolution) -> str:
    return f"{number}:" + "".join(f" {word}" for word in words)
