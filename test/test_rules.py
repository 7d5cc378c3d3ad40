import pytest
from peerident import rules
from peerident.rules import VersionRule
from peerident.util import pad_peer_id


@pytest.mark.parametrize(
    "rule,name,peer_id,label",
    [
        (rules.three_digit, "Halite", b"-HL0110-", "Halite 0.1.1"),
        (rules.three_digit, "qBittorrent", b"-qB4A50-", "qBittorrent 4.10.5"),
        (rules.three_digit, "Halite", b"-HL0.1-", "Halite 0.x.1"),
        (rules.four_digit, "Deluge", b"-DE13F0-", "Deluge 1.3.15.0"),
        (rules.two_major_two_minor, "Lphant", b"-LP0302-", "Lphant 3.02"),
        (rules.two_major_two_minor, "BitPump", b"-AXzz20-", "BitPump 0.20"),
        (rules.no_version, "BitFlu", b"-BF0000-", "BitFlu"),
        (rules.amazon, "Amazon S3", b"S3-1-0-0--", "Amazon S3 1.0.0"),
        (rules.aria2, "aria2", b"A2-1-2-0-", "aria2 1.2.0"),
        (rules.aria2, "aria2", b"A2-1-18-8-", "aria2 1.18.8"),
        (rules.aria2, "aria2", b"A2xxxxxxxx", "aria2"),
        (rules.bitbuddy, "BitBuddy", b"-BB1234-", "BitBuddy 1.234"),
        (rules.bitlord, "BitLord", b"-BL1234abc", "BitLord 1.2.3-4ab"),
        (rules.bitrocket, "BitRocket", b"-BR0810-", "BitRocket 0.8 (10)"),
        (rules.bittorrent_dna, "BitTorrent DNA", b"DNA010203", "BitTorrent DNA 1.2.3"),
        (rules.bits_on_wheels, "Bits on Wheels", b"-BOWA0B-", "Bits on Wheels 1.0.5"),
        (rules.bits_on_wheels, "Bits on Wheels", b"-BOWA0C-", "Bits on Wheels 1.0.6"),
        (rules.bits_on_wheels, "Bits on Wheels", b"-BOW123-", "Bits on Wheels 1.2.3"),
        (
            rules.blizzard,
            "Blizzard Downloader",
            b"BLZ\x01\x02",
            "Blizzard Downloader 22",
        ),
        (
            rules.blizzard,
            "Blizzard Downloader",
            b"BLZ\x09\xc8",
            "Blizzard Downloader 10200",
        ),
        (rules.btpd, "BT Protocol Daemon", b"btpd/0.13", "BT Protocol Daemon 0.1"),
        (rules.burst, "burst!", b"Mbrst1-1-32", "burst! 1.1.3"),
        (rules.ctorrent, "CTorrent", b"-CT1234-", "CTorrent 1.2.34"),
        (rules.folx, "Folx", b"-FL6000-", "Folx 6.x"),
        (rules.ktorrent, "KTorrent", b"-KT22D1-", "KTorrent 2.2 Dev 1"),
        (rules.ktorrent, "KTorrent", b"-KT23R4-", "KTorrent 2.3 RC 4"),
        (rules.ktorrent, "KTorrent", b"-KT4130-", "KTorrent 4.1.3"),
        (rules.mainline, "BitTorrent", b"M4-3-6--", "BitTorrent 4.3.6"),
        (rules.mainline, "BitTorrent", b"M7-10-2-", "BitTorrent 7.10.2"),
        (rules.mainline, "BitTorrent", b"MXXXXXXX", "BitTorrent"),
        (rules.mediaget, "MediaGet", b"-MG21--", "MediaGet 2.1"),
        (rules.mldonkey, "MLDonkey", b"-ML2.7.2-kgjjfkd", "MLDonkey 2.7.2"),
        (rules.opera, "Opera", b"OP7685f2c1495b", "Opera 7685"),
        (rules.picotorrent, "PicoTorrent", b"-PI0091-", "PicoTorrent 0.09.1"),
        (rules.plus, "Plus!", b"Plus12345", "Plus! 1.23"),
        (rules.qvod, "QVOD", b"QVOD0054", "QVOD 0.0.5.4"),
        (rules.transmission, "Transmission", b"-TR0006-", "Transmission 0.6"),
        (rules.transmission, "Transmission", b"-TR0072-", "Transmission 0.72"),
        (rules.transmission, "Transmission", b"-TR111Z-", "Transmission 1.11+"),
        (rules.transmission, "Transmission", b"-TR133X-", "Transmission 1.33+"),
        (rules.transmission, "Transmission", b"-TR4040-", "Transmission 4.04"),
        (rules.utorrent, "µTorrent", b"-UT341B-", "µTorrent 3.4.1 (Beta)"),
        (rules.utorrent, "µTorrent", b"-UT7a5\0-", "µTorrent 7.10.5"),
        (rules.utorrent, "µTorrent", b"-UT355d-", "µTorrent 3.5.5 (Debug)"),
        (rules.utorrent, "µTorrent Web", b"-UW1110Q", "µTorrent Web 1.1.10"),
        (rules.utorrent, "µTorrent Mac", b"-UM1870X", "µTorrent Mac 1.8.70 (Dev)"),
        (rules.xbt, "XBT Client", b"XBT054d-", "XBT Client 0.5.4 (Debug)"),
        (rules.xbt, "XBT Client", b"XBT054--", "XBT Client 0.5.4"),
        (rules.xfplay, "Xfplay", b"-XF9990-", "Xfplay 9.9.9"),
        (rules.xfplay, "Xfplay", b"-XF9992-", "Xfplay 9.9.92"),
        (rules.xtorrent, "Xtorrent", b"-XX0025-", "Xtorrent 0.0 (25"),
    ],
)
def test_rule(rule: VersionRule, name: str, peer_id: bytes, label: str) -> None:
    assert rule(name, pad_peer_id(peer_id)) == label


def test_rule_copies_non_ascii_bytes_as_replacement_characters() -> None:
    assert rules.opera("Opera", pad_peer_id(b"OP\xff123")) == "Opera �123"
