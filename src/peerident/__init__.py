"""
Identify BitTorrent clients from their peer IDs

``peerident`` takes the 20-byte peer ID that a BitTorrent peer sends in its
handshake and renders it as a human-readable client name & version, e.g.,
``Transmission 3.00`` or ``µTorrent 3.4.1 (Beta)``.  Classification is done
by a handful of special-purpose decoders followed by a lookup in a sorted
registry of known peer ID prefixes; anything unrecognized is rendered as an
escaped copy of its leading bytes.
"""

__version__ = "0.1.0"

from .buffer import OutputBuffer
from .core import ClientIdentifier, client_for_id, identify
from .errors import RegistryError

__all__ = [
    "ClientIdentifier",
    "OutputBuffer",
    "RegistryError",
    "client_for_id",
    "identify",
]
