from __future__ import annotations
import attr
from .buffer import OutputBuffer
from .clients import CLIENTS, LONG_PREFIX_CLIENTS
from .consts import DEFAULT_BUFFER_SIZE
from .decoders import (
    BitCometDecoder,
    BitSpiritDecoder,
    Decoder,
    FallbackEscaper,
    RegistryDecoder,
    ShadowDecoder,
)
from .util import TRACE, log


def default_decoders() -> list[Decoder]:
    # Order matters: Shad0w- and BitComet-style IDs can also match registry
    # prefixes, and the fallback accepts everything.
    return [
        ShadowDecoder(),
        BitCometDecoder(),
        BitSpiritDecoder(),
        RegistryDecoder(LONG_PREFIX_CLIENTS, label="long-prefix registry"),
        RegistryDecoder(CLIENTS),
        FallbackEscaper(),
    ]


@attr.define
class ClientIdentifier:
    decoders: list[Decoder] = attr.Factory(default_decoders)

    def identify(self, peer_id: bytes, out: OutputBuffer) -> OutputBuffer:
        """
        Write a label describing the client that produced ``peer_id`` to
        ``out`` and return ``out``.  The first decoder that recognizes the peer
        ID wins; labels too long for the buffer are truncated.
        """
        out.clear()
        for decoder in self.decoders:
            label = decoder.try_decode(peer_id)
            if label is not None:
                log.log(
                    TRACE, "Peer ID %r decoded by %s: %r", peer_id, decoder, label
                )
                out.write(label)
                break
        else:
            log.log(TRACE, "No decoder recognized peer ID %r", peer_id)
        return out

    def client_for_id(
        self, peer_id: bytes, capacity: int = DEFAULT_BUFFER_SIZE
    ) -> str:
        return str(self.identify(peer_id, OutputBuffer(capacity)))


DEFAULT_IDENTIFIER = ClientIdentifier()


def identify(peer_id: bytes, out: OutputBuffer) -> OutputBuffer:
    return DEFAULT_IDENTIFIER.identify(peer_id, out)


def client_for_id(peer_id: bytes, capacity: int = DEFAULT_BUFFER_SIZE) -> str:
    return DEFAULT_IDENTIFIER.client_for_id(peer_id, capacity)
