#: Length of a peer ID as sent in a BitTorrent handshake
PEER_ID_LENGTH = 20

#: Capacity (in bytes, including the terminator) of the output buffer used by
#: `client_for_id()` when none is given
DEFAULT_BUFFER_SIZE = 128

#: Number of leading peer ID bytes rendered when no decoder recognizes an ID
FALLBACK_PREFIX_LENGTH = 8

#: Capacity (in bytes, including the terminator) of the scratch space that the
#: fallback rendering is assembled in
SCRATCH_BUFFER_SIZE = 32

#: Number of leading bytes examined when decoding Shad0w-style peer IDs
SHADOW_ID_LENGTH = 9

#: Digits used by Shad0w-style peer IDs for version components, in order of
#: value
SHADOW_ALPHABET = (
    b"0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz.-"
)
