from __future__ import annotations
from collections.abc import Iterator
from typing import ClassVar
import attr
from .consts import PEER_ID_LENGTH
from .core import client_for_id


@attr.define
class Handshake:
    HEADER: ClassVar[bytes] = b"\x13BitTorrent protocol"
    LENGTH: ClassVar[int] = 20 + 8 + 20 + PEER_ID_LENGTH

    reserved: bytes
    info_hash: bytes
    peer_id: bytes

    def __str__(self) -> str:
        return (
            f"handshake; info_hash: {self.info_hash.hex()}; peer_id: {self.peer_id!r}"
        )

    @classmethod
    def parse(cls, blob: bytes) -> Handshake:
        if len(blob) != cls.LENGTH:
            raise ValueError(
                f"handshake wrong length; got {len(blob)} bytes, expected {cls.LENGTH}"
            )
        if blob[: len(cls.HEADER)] != cls.HEADER:
            raise ValueError("handshake had invalid protocol declaration")
        offset = len(cls.HEADER)
        reserved = blob[offset : offset + 8]
        offset += 8
        info_hash = blob[offset : offset + 20]
        offset += 20
        peer_id = blob[offset:]
        return cls(reserved=reserved, info_hash=info_hash, peer_id=peer_id)

    @property
    def client(self) -> str:
        return client_for_id(self.peer_id)


def iter_handshakes(blob: bytes) -> Iterator[Handshake]:
    """
    Parse a capture consisting of zero or more back-to-back handshakes.
    Raises `ValueError` on the first malformed one.
    """
    for offset in range(0, len(blob), Handshake.LENGTH):
        yield Handshake.parse(blob[offset : offset + Handshake.LENGTH])
