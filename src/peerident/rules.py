"""
Version formatting rules

Each rule takes a client's display name and its (NUL-padded) peer ID and
returns the display name followed by the version encoded in the peer ID.
Clients have historically encoded their versions in many mutually
incompatible ways; the generic rules cover the common Azureus-style
``-XXabcd-`` layouts, and the remaining rules each handle a single client
family's quirks.
"""

from __future__ import annotations
from typing import Callable
from .util import byte_text, charint, mnemonic_suffix, strint

VersionRule = Callable[[str, bytes], str]


def _b(peer_id: bytes, i: int) -> str:
    return byte_text(peer_id[i : i + 1])


def _c(peer_id: bytes, i: int) -> str:
    return charint(peer_id[i])


# Generic rules


def three_digit(name: str, peer_id: bytes) -> str:
    return f"{name} {_c(peer_id, 3)}.{_c(peer_id, 4)}.{_c(peer_id, 5)}"


def four_digit(name: str, peer_id: bytes) -> str:
    return (
        f"{name} {_c(peer_id, 3)}.{_c(peer_id, 4)}.{_c(peer_id, 5)}"
        f".{_c(peer_id, 6)}"
    )


def two_major_two_minor(name: str, peer_id: bytes) -> str:
    return f"{name} {strint(peer_id[3:5])}.{strint(peer_id[5:7]):02d}"


def no_version(name: str, _peer_id: bytes) -> str:
    return name


# Client-specific rules


def amazon(name: str, peer_id: bytes) -> str:
    return f"{name} {_b(peer_id, 3)}.{_b(peer_id, 5)}.{_b(peer_id, 7)}"


def aria2(name: str, peer_id: bytes) -> str:
    # A2-1-2-0- or A2-1-18-8-
    dash = ord("-")
    if peer_id[4] == dash and peer_id[6] == dash and peer_id[8] == dash:
        return f"{name} {_b(peer_id, 3)}.{_b(peer_id, 5)}.{_b(peer_id, 7)}"
    elif peer_id[4] == dash and peer_id[7] == dash and peer_id[9] == dash:
        return (
            f"{name} {_b(peer_id, 3)}.{_b(peer_id, 5)}{_b(peer_id, 6)}"
            f".{_b(peer_id, 8)}"
        )
    else:
        return name


def bitbuddy(name: str, peer_id: bytes) -> str:
    return f"{name} {_b(peer_id, 3)}.{byte_text(peer_id[4:7])}"


def bitlord(name: str, peer_id: bytes) -> str:
    return (
        f"{name} {_b(peer_id, 3)}.{_b(peer_id, 4)}.{_b(peer_id, 5)}"
        f"-{byte_text(peer_id[6:9])}"
    )


def bitrocket(name: str, peer_id: bytes) -> str:
    return f"{name} {_b(peer_id, 3)}.{_b(peer_id, 4)} ({byte_text(peer_id[5:7])})"


def bittorrent_dna(name: str, peer_id: bytes) -> str:
    return (
        f"{name} {strint(peer_id[3:5])}.{strint(peer_id[5:7])}"
        f".{strint(peer_id[7:9])}"
    )


def bits_on_wheels(name: str, peer_id: bytes) -> str:
    # Bits on Wheels uses the pattern -BOWxxx-yyyyyyyyyyyy, where y is random
    # (uppercase letters) and x depends on the version.  Version 1.0.6 has
    # xxx = A0C.
    if peer_id[4:7] == b"A0B":
        return f"{name} 1.0.5"
    elif peer_id[4:7] == b"A0C":
        return f"{name} 1.0.6"
    else:
        return f"{name} {_b(peer_id, 4)}.{_b(peer_id, 5)}.{_b(peer_id, 6)}"


def blizzard(name: str, peer_id: bytes) -> str:
    # The version bytes are raw numbers, not ASCII digits
    return f"{name} {peer_id[3] + 1}{peer_id[4]}"


def btpd(name: str, peer_id: bytes) -> str:
    return f"{name} {byte_text(peer_id[5:8])}"


def burst(name: str, peer_id: bytes) -> str:
    return f"{name} {_b(peer_id, 5)}.{_b(peer_id, 7)}.{_b(peer_id, 9)}"


def ctorrent(name: str, peer_id: bytes) -> str:
    return f"{name} {_c(peer_id, 3)}.{_c(peer_id, 4)}.{byte_text(peer_id[5:7])}"


def folx(name: str, peer_id: bytes) -> str:
    return f"{name} {_c(peer_id, 3)}.x"


def ktorrent(name: str, peer_id: bytes) -> str:
    if peer_id[5] == ord("D"):
        return f"{name} {_c(peer_id, 3)}.{_c(peer_id, 4)} Dev {_c(peer_id, 6)}"
    elif peer_id[5] == ord("R"):
        return f"{name} {_c(peer_id, 3)}.{_c(peer_id, 4)} RC {_c(peer_id, 6)}"
    else:
        return three_digit(name, peer_id)


def mainline(name: str, peer_id: bytes) -> str:
    # Bram's newer style, also used by Queen Bee: M4-3-6-- or Q1-10-0-
    dash = ord("-")
    if peer_id[4] == dash and peer_id[6] == dash:
        return f"{name} {_b(peer_id, 1)}.{_b(peer_id, 3)}.{_b(peer_id, 5)}"
    elif peer_id[5] == dash:
        return f"{name} {_b(peer_id, 1)}.{byte_text(peer_id[3:5])}.{_b(peer_id, 6)}"
    else:
        return name


def mediaget(name: str, peer_id: bytes) -> str:
    return f"{name} {_c(peer_id, 3)}.{_c(peer_id, 4)}"


def mldonkey(name: str, peer_id: bytes) -> str:
    # -ML followed by a dotted version, e.g. -ML2.7.2-kgjjfkd
    return f"{name} {byte_text(peer_id[3:8])}"


def opera(name: str, peer_id: bytes) -> str:
    # OP followed by a four-digit build number
    return f"{name} {byte_text(peer_id[2:6])}"


def picotorrent(name: str, peer_id: bytes) -> str:
    return f"{name} {_c(peer_id, 3)}.{byte_text(peer_id[4:6])}.{_c(peer_id, 6)}"


def plus(name: str, peer_id: bytes) -> str:
    return f"{name} {_b(peer_id, 4)}.{byte_text(peer_id[5:7])}"


def qvod(name: str, peer_id: bytes) -> str:
    return (
        f"{name} {_c(peer_id, 4)}.{_c(peer_id, 5)}.{_c(peer_id, 6)}"
        f".{_c(peer_id, 7)}"
    )


def transmission(name: str, peer_id: bytes) -> str:
    if peer_id[3:6] == b"000":
        # Very old style: -TR0006- is 0.6
        return f"{name} 0.{_b(peer_id, 6)}"
    elif peer_id[3:5] == b"00":
        # Previous style: -TR0072- is 0.72
        return f"{name} 0.{strint(peer_id[5:7]):02d}"
    else:
        # Current style: -TR111Z- is 1.11+
        plus_sign = "+" if peer_id[6] in b"ZX" else ""
        return (
            f"{name} {strint(peer_id[3:4])}.{strint(peer_id[4:6]):02d}{plus_sign}"
        )


def utorrent(name: str, peer_id: bytes) -> str:
    major = strint(peer_id[3:4], 16)
    minor = strint(peer_id[4:5], 16)
    if peer_id[7] == ord("-"):
        return (
            f"{name} {major}.{minor}.{strint(peer_id[5:6], 16)}"
            f"{mnemonic_suffix(peer_id[6])}"
        )
    else:
        # Longer version numbers replace the trailing dash with another digit
        return (
            f"{name} {major}.{minor}.{strint(peer_id[5:7])}"
            f"{mnemonic_suffix(peer_id[7])}"
        )


def xbt(name: str, peer_id: bytes) -> str:
    return (
        f"{name} {_b(peer_id, 3)}.{_b(peer_id, 4)}.{_b(peer_id, 5)}"
        f"{mnemonic_suffix(peer_id[6])}"
    )


def xfplay(name: str, peer_id: bytes) -> str:
    if peer_id[6] == ord("0"):
        return three_digit(name, peer_id)
    else:
        return f"{name} {_b(peer_id, 3)}.{_b(peer_id, 4)}.{byte_text(peer_id[5:7])}"


def xtorrent(name: str, peer_id: bytes) -> str:
    # The parenthesis is left open; existing Xtorrent labels look like this
    return f"{name} {_c(peer_id, 3)}.{_c(peer_id, 4)} ({strint(peer_id[5:7])}"
