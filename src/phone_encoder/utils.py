from pathlib import Path
from typing import BinaryIO, Iterator, TypeAlias, Union

import structlog

log = structlog.get_logger(__name__)

PathLike: TypeAlias = Union[str, Path]


class InputFileError(OSError):
    """An input file (word list or number list) could not be opened."""

    def __init__(self, path: PathLike, reason: OSError):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read {self.path}: {reason.strerror or reason}")


def read_lines(path: PathLike, *, encoding: str = "utf-8") -> Iterator[str]:
    """
    Open a text file and iterate over its lines without line endings.
    The file is opened eagerly so a missing file fails here, not on first iteration.
    Lines that cannot be decoded are skipped.
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise InputFileError(path, e) from e
    return _decoded_lines(f, str(path), encoding)


def _decoded_lines(f: BinaryIO, path: str, encoding: str) -> Iterator[str]:
    with f:
        for line_number, raw in enumerate(f, start=1):
            try:
                line = raw.decode(encoding)
            except UnicodeDecodeError:
                log.debug("skipping undecodable line", path=path, line_number=line_number)
                continue
            yield line.removesuffix("\n").removesuffix("\r")
