"""
Known peer ID prefixes

Entries must stay sorted by prefix (byte-wise), and no prefix may be a prefix
of another entry's prefix in the same registry; `ClientRegistry` checks both
at import time.  Signatures that extend a shorter signature belong in
`LONG_PREFIX_CLIENTS`, which is consulted first.
"""

from __future__ import annotations
from . import rules
from .registry import ClientRegistry

CLIENTS = ClientRegistry.from_table(
    [
        (b"-AD", "Advanced Download Manager", rules.three_digit),
        (b"-AG", "Ares", rules.four_digit),
        (b"-AR", "Arctic", rules.four_digit),
        (b"-AT", "Artemis", rules.four_digit),
        (b"-AV", "Avicora", rules.four_digit),
        (b"-AX", "BitPump", rules.two_major_two_minor),
        (b"-AZ", "Azureus / Vuze", rules.four_digit),
        (b"-A~", "Ares", rules.three_digit),
        (b"-BB", "BitBuddy", rules.bitbuddy),
        (b"-BC", "BitComet", rules.two_major_two_minor),
        (b"-BE", "BitTorrent SDK", rules.four_digit),
        (b"-BF", "BitFlu", rules.no_version),
        (b"-BG", "BTGetit", rules.four_digit),
        (b"-BH", "BitZilla", rules.four_digit),
        (b"-BI", "BiglyBT", rules.four_digit),
        (b"-BL", "BitLord", rules.bitlord),
        (b"-BM", "BitMagnet", rules.four_digit),
        (b"-BN", "Baidu Netdisk", rules.no_version),
        (b"-BOW", "Bits on Wheels", rules.bits_on_wheels),
        (b"-BP", "BitTorrent Pro (Azureus + Spyware)", rules.four_digit),
        (b"-BR", "BitRocket", rules.bitrocket),
        (b"-BS", "BTSlave", rules.four_digit),
        (b"-BT", "BitTorrent", rules.utorrent),
        (b"-BW", "BitWombat", rules.four_digit),
        (b"-BX", "BittorrentX", rules.four_digit),
        (b"-CD", "Enhanced CTorrent", rules.two_major_two_minor),
        (b"-CT", "CTorrent", rules.ctorrent),
        (b"-DE", "Deluge", rules.four_digit),
        (b"-DP", "Propagate Data Client", rules.four_digit),
        (b"-EB", "EBit", rules.four_digit),
        (b"-ES", "Electric Sheep", rules.three_digit),
        (b"-FC", "FileCroc", rules.four_digit),
        (b"-FD", "Free Download Manager", rules.three_digit),
        (b"-FG", "FlashGet", rules.two_major_two_minor),
        (b"-FL", "Folx", rules.folx),
        (b"-FT", "FoxTorrent/RedSwoosh", rules.four_digit),
        (b"-FW", "FrostWire", rules.three_digit),
        (b"-FX", "Freebox", rules.four_digit),
        (b"-G3", "G3 Torrent", rules.no_version),
        (b"-GR", "GetRight", rules.four_digit),
        (b"-GS", "GSTorrent", rules.four_digit),
        (b"-HK", "Hekate", rules.four_digit),
        (b"-HL", "Halite", rules.three_digit),
        (b"-HN", "Hydranode", rules.four_digit),
        (b"-KG", "KGet", rules.four_digit),
        (b"-KT", "KTorrent", rules.ktorrent),
        (b"-LC", "LeechCraft", rules.four_digit),
        (b"-LH", "LH-ABC", rules.four_digit),
        (b"-LP", "Lphant", rules.two_major_two_minor),
        (b"-LT", "libtorrent (Rasterbar)", rules.three_digit),
        (b"-LW", "LimeWire", rules.no_version),
        (b"-Lr", "LibreTorrent", rules.three_digit),
        (b"-MG", "MediaGet", rules.mediaget),
        (b"-MK", "Meerkat", rules.four_digit),
        (b"-ML", "MLDonkey", rules.mldonkey),
        (b"-MO", "MonoTorrent", rules.four_digit),
        (b"-MP", "MooPolice", rules.three_digit),
        (b"-MR", "Miro", rules.four_digit),
        (b"-MT", "Moonlight", rules.four_digit),
        (b"-NE", "BT Next Evolution", rules.four_digit),
        (b"-NX", "Net Transport", rules.four_digit),
        (b"-OS", "OneSwarm", rules.four_digit),
        (b"-OT", "OmegaTorrent", rules.four_digit),
        (b"-PD", "Pando", rules.four_digit),
        (b"-PI", "PicoTorrent", rules.picotorrent),
        (b"-QD", "QQDownload", rules.four_digit),
        (b"-QT", "QT 4 Torrent example", rules.four_digit),
        (b"-RS", "Rufus", rules.four_digit),
        (b"-RT", "Retriever", rules.four_digit),
        (b"-RZ", "RezTorrent", rules.four_digit),
        (b"-SB", "~Swiftbit", rules.four_digit),
        (b"-SD", "Thunder", rules.four_digit),
        (b"-SM", "SoMud", rules.four_digit),
        (b"-SP", "BitSpirit", rules.three_digit),
        (b"-SS", "SwarmScope", rules.four_digit),
        (b"-ST", "SymTorrent", rules.four_digit),
        (b"-SZ", "Shareaza", rules.four_digit),
        (b"-S~", "Shareaza", rules.four_digit),
        (b"-TN", "Torrent .NET", rules.four_digit),
        (b"-TR", "Transmission", rules.transmission),
        (b"-TS", "Torrentstorm", rules.four_digit),
        (b"-TT", "TuoTu", rules.four_digit),
        (b"-UE", "µTorrent Embedded", rules.utorrent),
        (b"-UL", "uLeecher!", rules.four_digit),
        (b"-UM", "µTorrent Mac", rules.utorrent),
        (b"-UT", "µTorrent", rules.utorrent),
        (b"-UW", "µTorrent Web", rules.utorrent),
        (b"-VG", "Vagaa", rules.four_digit),
        (b"-WS", "HTTP Seed", rules.no_version),
        (b"-WT", "BitLet", rules.four_digit),
        (b"-WW", "WebTorrent", rules.four_digit),
        (b"-WY", "FireTorrent", rules.four_digit),
        (b"-XC", "Xtorrent", rules.xtorrent),
        (b"-XF", "Xfplay", rules.xfplay),
        (b"-XL", "Xunlei", rules.four_digit),
        (b"-XS", "XSwifter", rules.four_digit),
        (b"-XT", "XanTorrent", rules.four_digit),
        (b"-XX", "Xtorrent", rules.xtorrent),
        (b"-ZO", "Zona", rules.four_digit),
        (b"-ZT", "Zip Torrent", rules.four_digit),
        (b"-bk", "BitKitten (libtorrent)", rules.four_digit),
        (b"-lt", "libTorrent (Rakshasa)", rules.three_digit),
        (b"-pb", "pbTorrent", rules.three_digit),
        (b"-qB", "qBittorrent", rules.three_digit),
        (b"-st", "SharkTorrent", rules.four_digit),
        (b"10-------", "JVtorrent", rules.no_version),
        (b"346-", "TorrentTopia", rules.no_version),
        (b"A2", "aria2", rules.aria2),
        (b"AZ2500BT", "BitTyrant (Azureus Mod)", rules.no_version),
        (b"BLZ", "Blizzard Downloader", rules.blizzard),
        (b"DNA", "BitTorrent DNA", rules.bittorrent_dna),
        (b"LIME", "Limewire", rules.no_version),
        (b"M", "BitTorrent", rules.mainline),
        (b"OP", "Opera", rules.opera),
        (b"Pando", "Pando", rules.no_version),
        (b"Plus", "Plus!", rules.plus),
        (b"Q", "Queen Bee", rules.mainline),
        (b"S3", "Amazon S3", rules.amazon),
        (b"TIX", "Tixati", rules.two_major_two_minor),
        (b"XBT", "XBT Client", rules.xbt),
        (b"a00---0", "Swarmy", rules.no_version),
        (b"a02---0", "Swarmy", rules.no_version),
        (b"aria2-", "aria2", rules.no_version),
        (b"btpd", "BT Protocol Daemon", rules.btpd),
        (b"eX", "eXeem", rules.no_version),
        (b"martini", "Martini Man", rules.no_version),
    ]
)

#: Signatures that begin with another entry's prefix (``-WT``, ``M``, ``Q``)
LONG_PREFIX_CLIENTS = ClientRegistry.from_table(
    [
        (b"-WT-", "BitLet", rules.no_version),
        (b"Mbrst", "burst!", rules.burst),
        (b"QVOD", "QVOD", rules.qvod),
    ]
)
