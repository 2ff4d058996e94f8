from collections import defaultdict
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

import structlog

from phone_encoder.encoding import digit_value_to_digits, word_to_digit_value
from phone_encoder.utils import PathLike, read_lines

log = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Dictionary:
    """Read-only index from digit value to the words that encode to it, in input order."""

    entries: Mapping[int, Tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))
    max_digits: int = 0

    def get(self, value: int) -> Tuple[str, ...]:
        return self.entries.get(value, ())

    def __contains__(self, value: int) -> bool:
        return value in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def word_count(self) -> int:
        return sum(len(words) for words in self.entries.values())


def build_dictionary(words: Iterable[str]) -> Dictionary:
    """
    Index words by digit value.
    Duplicates are kept and words without letters land on the bare sentinel key.
    """
    index: defaultdict[int, list[str]] = defaultdict(list)
    for word in words:
        index[word_to_digit_value(word)].append(word)

    frozen = {value: tuple(matches) for value, matches in index.items()}
    max_digits = max((len(digit_value_to_digits(value)) for value in frozen), default=0)
    return Dictionary(entries=MappingProxyType(frozen), max_digits=max_digits)


def load_dictionary(path: PathLike) -> Dictionary:
    """Load a word list file, one word per line. Raises InputFileError if unreadable."""
    dictionary = build_dictionary(read_lines(path))
    log.debug("dictionary loaded", path=str(path), words=dictionary.word_count, keys=len(dictionary))
    return dictionary
