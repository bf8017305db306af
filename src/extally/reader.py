"""Input handling: decodes the list of paths one line at a time."""

import io
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional

from .logger import get_logger

logger = get_logger("extally.reader")

STDIN_NAME = "-"


class InputReadError(Exception):
    """The input stream could not be read or decoded."""

    def __init__(self, source: str, cause: Exception):
        self.source = source
        self.cause = cause
        super().__init__(f"Could not read {source}: {cause}")


def read_lines(stream: BinaryIO, source: str = "<stdin>") -> Iterator[str]:
    """Yield decoded lines from a binary stream without their terminators.

    Lines end only at a line feed; a carriage return right before it is
    dropped, any other carriage return stays part of the line. Decoding is
    strict UTF-8; an undecodable byte sequence aborts the read.
    """
    text = io.TextIOWrapper(stream, encoding="utf-8", errors="strict", newline="\n")
    try:
        for line in text:
            line = line.rstrip("\n")
            if line.endswith("\r"):
                line = line[:-1]
            yield line
    except (UnicodeDecodeError, OSError) as e:
        logger.error(f"Read failed on {source}: {e}")
        raise InputReadError(source, e) from e
    finally:
        # Leave the underlying stream open for its owner
        text.detach()


@contextmanager
def open_input(path: Optional[Path] = None) -> Iterator[Iterator[str]]:
    """Open the path list, defaulting to standard input.

    Yields an iterator of lines. Failures opening the file are reported as
    InputReadError, the same as failures while reading it.
    """
    if path is None or str(path) == STDIN_NAME:
        logger.debug("Reading paths from standard input")
        yield read_lines(sys.stdin.buffer)
        return

    try:
        stream = open(path, "rb")
    except OSError as e:
        logger.error(f"Could not open {path}: {e}")
        raise InputReadError(str(path), e) from e

    logger.debug(f"Reading paths from {path}")
    with stream:
        yield read_lines(stream, str(path))
