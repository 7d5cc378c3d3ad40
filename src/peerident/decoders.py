from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional
import attr
from .consts import (
    FALLBACK_PREFIX_LENGTH,
    SCRATCH_BUFFER_SIZE,
    SHADOW_ALPHABET,
    SHADOW_ID_LENGTH,
)
from .registry import ClientRegistry
from .util import escape_byte, pad_peer_id

SHADOW_CLIENTS = {
    ord("A"): "ABC",
    ord("O"): "Osprey",
    ord("Q"): "BTQueue",
    ord("R"): "Tribler",
    ord("S"): "Shad0w",
    ord("T"): "BitTornado",
    ord("U"): "UPnP NAT Bit Torrent",
}

BITCOMET_MODS = {
    b"exbc": "",
    b"FUTB": "(Solidox Mod) ",
    b"xUTB": "(Mod 2) ",
}


class Decoder(ABC):
    @abstractmethod
    def try_decode(self, peer_id: bytes) -> Optional[str]:
        """
        Return a label for ``peer_id`` if it is in a format this decoder
        recognizes, `None` otherwise
        """
        ...


class ShadowDecoder(Decoder):
    """
    Shad0w's experimental client and BitTornado introduced peer IDs that begin
    with a letter identifying the client, followed by up to five characters
    encoding the version (padded with dashes if shorter), followed by
    ``---``.  Each version character is a digit in `SHADOW_ALPHABET`; e.g.,
    ``S58B-----`` is Shad0w 5.8.11.
    """

    def __str__(self) -> str:
        return "Shad0w-style decoder"

    def try_decode(self, peer_id: bytes) -> Optional[str]:
        signature = peer_id[:SHADOW_ID_LENGTH]
        if len(signature) != SHADOW_ID_LENGTH or signature[6:] != b"---":
            return None
        signature = signature.rstrip(b"-")
        if not signature:
            return None
        version: list[str] = []
        for ch in signature[1:]:
            if (pos := SHADOW_ALPHABET.find(ch)) == -1:
                return None
            version.append(str(pos))
        try:
            name = SHADOW_CLIENTS[signature[0]]
        except KeyError:
            return None
        if version:
            return f"{name} {'.'.join(version)}"
        else:
            return name


class BitCometDecoder(Decoder):
    """
    BitComet used to produce peer IDs consisting of ``exbc`` followed by two
    bytes *x* and *y*, followed by random bytes; the version number is *x* in
    decimal, a decimal point, and *y* as two decimal digits.  BitLord uses the
    same scheme but adds ``LORD`` after the version bytes, and unofficial
    patches replaced ``exbc`` with ``FUTB`` or ``xUTB``.  (BitComet switched
    to Azureus-style peer IDs as of version 0.59.)
    """

    def __str__(self) -> str:
        return "BitComet-style decoder"

    def try_decode(self, peer_id: bytes) -> Optional[str]:
        mod = BITCOMET_MODS.get(peer_id[:4])
        if mod is None:
            return None
        padded = pad_peer_id(peer_id)
        name = "BitLord" if padded[6:10] == b"LORD" else "BitComet"
        # The version bytes are raw numbers, not ASCII digits
        return f"{name} {mod}{padded[4]}.{padded[5]:02d}"


class BitSpiritDecoder(Decoder):
    # Old BitSpirit peer IDs: NUL, a raw version byte, then "BS"

    def __str__(self) -> str:
        return "BitSpirit decoder"

    def try_decode(self, peer_id: bytes) -> Optional[str]:
        padded = pad_peer_id(peer_id)
        if padded[0] == 0 and padded[2:4] == b"BS":
            return f"BitSpirit {padded[1] or 1}"
        else:
            return None


@attr.define
class RegistryDecoder(Decoder):
    registry: ClientRegistry
    label: str = "registry"

    def __str__(self) -> str:
        return f"{self.label} lookup"

    def try_decode(self, peer_id: bytes) -> Optional[str]:
        record = self.registry.lookup(peer_id)
        if record is None:
            return None
        return record.format(pad_peer_id(peer_id))


class FallbackEscaper(Decoder):
    """
    Renders the first few bytes of any peer ID, with printable ASCII copied
    as-is and everything else as ``%XX``.  Never fails to produce a label.
    """

    def __str__(self) -> str:
        return "fallback escaper"

    def try_decode(self, peer_id: bytes) -> str:
        scratch = "".join(map(escape_byte, peer_id[:FALLBACK_PREFIX_LENGTH]))
        return scratch[: SCRATCH_BUFFER_SIZE - 1]
