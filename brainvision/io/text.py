from __future__ import annotations

from pathlib import Path

# "\1" stands for a literal comma inside a comma-separated field.
ESCAPED_COMMA = "\\1"
_SENTINEL = "\x00"


def tokenize(text: str, delimiter: str = ",") -> list[str]:
    """Split `text` on `delimiter`, honouring the `\\1` escaped comma.

    Examples
    --------
    "Fp1,,0.1,µV" -> ["Fp1", "", "0.1", "µV"]
    "a\\1b,c"     -> ["a,b", "c"]
    ""            -> []
    """
    if not text:
        return []
    protected = text.replace(ESCAPED_COMMA, _SENTINEL)
    return [token.strip().replace(_SENTINEL, ",") for token in protected.split(delimiter)]


def is_skippable(line: str) -> bool:
    """Blank lines, `;` comments and `[Section]` headers carry no key/value."""
    return not line or line.startswith(";") or line.startswith("[")


def parse_int(text: str) -> int | None:
    """Plain ASCII integer, or None (no digit separators, no Unicode digits)."""
    if not text.isascii() or "_" in text:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def parse_float(text: str) -> float | None:
    """Plain ASCII float, or None (no digit separators, no Unicode digits)."""
    if not text.isascii() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def read_lines(path: Path) -> list[str]:
    """Read a .vhdr / .vmrk file as stripped text lines.

    Files are UTF-8 (Codepage=UTF-8) or the Windows ANSI code page (cp1252).
    Only LF ends a line; the CR of CRLF is removed by strip().
    """
    raw = path.read_bytes()
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        text = raw.decode("cp1252", errors="replace")
    return [line.strip() for line in text.split("\n")]
