"""
Tests for extension derivation and the tally report
"""

import pytest

from extally.tally import (
    NO_EXTENSION_LABEL,
    ExtensionTally,
    display_label,
    extension_key,
    format_report,
)


def tally_of(lines):
    return ExtensionTally().ingest_all(lines)


@pytest.mark.parametrize("path, expected", [
    ("file.txt", "txt"),
    ("FILE.TXT", "txt"),
    ("doc.Pdf", "pdf"),
    ("archive.tar.gz", "gz"),
    ("src/main.rs", "rs"),
    ("/abs/path/to/Image.PNG", "png"),
    ("dir.d/README", ""),
    ("README", ""),
    (".bashrc", ""),
    (".hidden.txt", "txt"),
    ("..txt", "txt"),
    ("name.", ""),
    (".", ""),
    ("..", ""),
    ("dir/", ""),
    ("dir/file.TXT/", "txt"),
    ("/", ""),
    ("foo.txt/.", "txt"),
    ("a/./b.PY", "py"),
    ("./notes.md", "md"),
    ("a/..", ""),
    ("./", ""),
    ("C:\\Users\\me\\notes.MD", "md"),
])
def test_extension_key(path, expected):
    assert extension_key(path) == expected


def test_extension_key_is_pure():
    path = "some/Dir.v2/Report.Final.DOCX"
    assert extension_key(path) == extension_key(path) == "docx"


def test_display_label():
    assert display_label("") == NO_EXTENSION_LABEL == "[no extension]"
    assert display_label("txt") == ".txt"


def test_basic_extensions():
    tally = tally_of(["file1.txt", "file2.txt", "image.png", "doc.pdf"])

    assert tally.counts == {"txt": 2, "png": 1, "pdf": 1}
    assert tally.report() == [(".pdf", 1), (".png", 1), (".txt", 2)]


def test_no_extensions():
    tally = tally_of(["file1", "file2", "README"])

    assert tally.counts == {"": 3}
    assert format_report(tally.report()) == ["[no extension]: 3"]


def test_empty_input():
    tally = tally_of([])

    assert tally.counts == {}
    assert tally.report() == []
    assert tally.total == 0


def test_empty_lines():
    tally = tally_of(["file1.txt", "", "file2.txt", ""])

    assert tally.counts == {"txt": 2}
    assert format_report(tally.report()) == [".txt: 2"]


def test_whitespace_only_lines_are_skipped():
    tally = tally_of(["   ", "\t", "  notes.md  ", "\r"])

    assert tally.counts == {"md": 1}
    assert "" not in tally.counts


def test_mixed_case_extensions():
    tally = tally_of(["file1.TXT", "file2.txt", "image.PNG", "doc.Pdf"])

    assert tally.counts == {"txt": 2, "png": 1, "pdf": 1}


def test_lines_are_trimmed_before_derivation():
    tally = tally_of(["  a.TXT  ", "b.txt\t"])

    assert tally.counts == {"txt": 2}


def test_total_matches_non_blank_lines():
    lines = ["a.py", "", "b.py", "c", "  ", "d.rs", ".env"]
    tally = tally_of(lines)

    assert tally.total == sum(1 for line in lines if line.strip())
    assert tally.total == sum(count for _, count in tally.report())


def test_report_is_ascending_by_count():
    lines = ["a.py"] * 5 + ["b.rs"] * 2 + ["c.md"] * 7 + ["d"] * 1 + ["e.go"] * 3
    counts = [count for _, count in tally_of(lines).report()]

    assert counts == sorted(counts)
    assert counts == [1, 2, 3, 5, 7]


def test_ties_are_ordered_by_extension():
    tally = tally_of(["z.zip", "a.txt", "README", "m.md", "x.zip"])

    assert tally.report() == [
        ("[no extension]", 1),
        (".md", 1),
        (".txt", 1),
        (".zip", 2),
    ]


def test_format_report():
    assert format_report([("[no extension]", 3), (".txt", 4)]) == [
        "[no extension]: 3",
        ".txt: 4",
    ]


def test_control_separators_are_not_trimmed():
    tally = tally_of(["\x1c\x1f", "  \x1e  "])

    assert tally.counts == {"": 2}


def test_unicode_whitespace_is_trimmed():
    tally = tally_of(["\u3000photo.JPG\xa0", "\u2003"])

    assert tally.counts == {"jpg": 1}
