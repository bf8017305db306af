"""
Extension tally for EXTALLY
Counts file paths by their lowercased extension and builds the sorted report
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from .logger import get_logger

logger = get_logger("extally.tally")

NO_EXTENSION_LABEL = "[no extension]"

ReportRow = Tuple[str, int]

# Unicode White_Space characters; str.strip() would also remove \x1c-\x1f
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def extension_key(path: str) -> str:
    """Return the lowercased extension of the path's final segment, or "" if it has none.

    The extension is whatever follows the last dot of the final segment, as long
    as that dot is not the segment's first character and something follows it.
    """
    # "." segments name the directory before them, ".." does not
    segments = [part for part in path.split("/") if part and part != "."]
    if not segments:
        return ""

    name = segments[-1]
    dot = name.rfind(".")
    if dot <= 0 or dot == len(name) - 1:
        return ""

    return name[dot + 1:].lower()


def display_label(key: str) -> str:
    """Label shown for an extension key in the report"""
    if not key:
        return NO_EXTENSION_LABEL
    return f".{key}"


@dataclass
class ExtensionTally:
    """Occurrence counts per extension key"""

    counts: Dict[str, int] = field(default_factory=dict)

    def ingest(self, line: str) -> None:
        """Count one input line. Blank lines are ignored."""
        path = line.strip(WHITESPACE)
        if not path:
            return

        key = extension_key(path)
        self.counts[key] = self.counts.get(key, 0) + 1
        logger.debug(f"{path!r} -> {display_label(key)}")

    def ingest_all(self, lines: Iterable[str]) -> "ExtensionTally":
        for line in lines:
            self.ingest(line)
        return self

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def report(self) -> List[ReportRow]:
        """Rows sorted ascending by count, ties ordered by extension key.

        The "no extension" key is the empty string, so it sorts first among
        rows with the same count.
        """
        ordered = sorted(self.counts.items(), key=lambda item: (item[1], item[0]))
        return [(display_label(key), count) for key, count in ordered]


def format_report(rows: Iterable[ReportRow]) -> List[str]:
    return [f"{label}: {count}" for label, count in rows]
