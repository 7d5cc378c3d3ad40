import pytest
from peerident.handshake import Handshake, iter_handshakes

TR_HANDSHAKE = (
    b"\x13BitTorrent protocol\x00\x00\x00\x00\x00\x10\x00\x05k\xcb\xd4A"
    b"\xd7\xa0\x88\xc6;\xa8\xf8\x82\xe3\x12\x91\xd3\x85\xa7\x96L-TR3000"
    b"-vfu1svh0ewb6"
)

QB_HANDSHAKE = (
    b"\x13BitTorrent protocol\x00\x00\x00\x00\x00\x18\x00\x05k\xcb\xd4A"
    b"\xd7\xa0\x88\xc6;\xa8\xf8\x82\xe3\x12\x91\xd3\x85\xa7\x96L-qB4360"
    b"-5Ngjy9uIMl~O"
)


@pytest.mark.parametrize(
    "blob,handshake,client",
    [
        (
            TR_HANDSHAKE,
            Handshake(
                reserved=b"\x00\x00\x00\x00\x00\x10\x00\x05",
                info_hash=(
                    b"k\xcb\xd4A\xd7\xa0\x88\xc6;\xa8\xf8\x82\xe3\x12\x91\xd3"
                    b"\x85\xa7\x96L"
                ),
                peer_id=b"-TR3000-vfu1svh0ewb6",
            ),
            "Transmission 3.00",
        ),
        (
            QB_HANDSHAKE,
            Handshake(
                reserved=b"\x00\x00\x00\x00\x00\x18\x00\x05",
                info_hash=(
                    b"k\xcb\xd4A\xd7\xa0\x88\xc6;\xa8\xf8\x82\xe3\x12\x91\xd3"
                    b"\x85\xa7\x96L"
                ),
                peer_id=b"-qB4360-5Ngjy9uIMl~O",
            ),
            "qBittorrent 4.3.6",
        ),
    ],
)
def test_handshake(blob: bytes, handshake: Handshake, client: str) -> None:
    hs = Handshake.parse(blob)
    assert hs == handshake
    assert hs.client == client


@pytest.mark.parametrize(
    "blob",
    [
        b"",
        TR_HANDSHAKE[:-1],
        TR_HANDSHAKE + b"x",
        b"\x13BitTorrent protocoL" + TR_HANDSHAKE[20:],
    ],
)
def test_bad_handshake(blob: bytes) -> None:
    with pytest.raises(ValueError):
        Handshake.parse(blob)


def test_iter_handshakes() -> None:
    peer_ids = [hs.peer_id for hs in iter_handshakes(TR_HANDSHAKE + QB_HANDSHAKE)]
    assert peer_ids == [b"-TR3000-vfu1svh0ewb6", b"-qB4360-5Ngjy9uIMl~O"]
    assert list(iter_handshakes(b"")) == []


def test_iter_handshakes_truncated() -> None:
    it = iter_handshakes(TR_HANDSHAKE + QB_HANDSHAKE[:30])
    assert next(it).peer_id == b"-TR3000-vfu1svh0ewb6"
    with pytest.raises(ValueError):
        next(it)
