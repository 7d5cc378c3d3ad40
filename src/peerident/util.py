from __future__ import annotations
from collections.abc import Iterable, Iterator
import logging
from string import ascii_lowercase, digits
from .consts import PEER_ID_LENGTH

log = logging.getLogger(__package__)

TRACE = 5

BASE36_DIGITS = digits + ascii_lowercase


def charint(ch: int) -> str:
    """
    Render a single peer ID byte as a base-36 digit value: ``0``-``9`` map to
    themselves and letters (case-insensitive) map to ``10``-``35``.  Any other
    byte is rendered as ``x``.
    """
    c = chr(ch).lower() if ch < 0x80 else ""
    if c and c in BASE36_DIGITS:
        return str(BASE36_DIGITS.index(c))
    else:
        return "x"


def strint(span: bytes, base: int = 10) -> int:
    """
    Parse the longest leading run of ``base`` digits in ``span`` (with an
    optional leading minus sign) as an integer.  Returns 0 if ``span`` does not
    start with a number.
    """
    valid = BASE36_DIGITS[:base]
    text = span.decode("latin-1")
    start = 1 if text.startswith("-") else 0
    end = start
    while end < len(text) and text[end].lower() in valid:
        end += 1
    if end == start:
        return 0
    return int(text[:end], base)


def mnemonic_suffix(ch: int) -> str:
    # Build-type marker used by the µTorrent & XBT families
    if ch in b"bB":
        return " (Beta)"
    elif ch == ord("d"):
        return " (Debug)"
    elif ch in b"xXZ":
        return " (Dev)"
    else:
        return ""


def byte_text(blob: bytes) -> str:
    # For copying peer ID bytes verbatim into a label
    return blob.decode("utf-8", "replace")


def escape_byte(ch: int) -> str:
    if 0x20 <= ch < 0x7F:
        return chr(ch)
    else:
        return f"%{ch:02X}"


def pad_peer_id(peer_id: bytes) -> bytes:
    """
    Right-pad ``peer_id`` with NUL bytes to the standard peer ID length so that
    fixed offsets can be read from it safely
    """
    return peer_id.ljust(PEER_ID_LENGTH, b"\0")


def yield_lines(fp: Iterable[str]) -> Iterator[str]:
    for line in fp:
        line = line.strip()
        if line and not line.startswith("#"):
            yield line
