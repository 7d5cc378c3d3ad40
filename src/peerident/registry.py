from __future__ import annotations
from collections.abc import Iterable, Iterator
from typing import Optional
import attr
from .errors import RegistryError
from .rules import VersionRule
from .util import TRACE, escape_byte, log


@attr.define(frozen=True)
class ClientRecord:
    prefix: bytes
    name: str
    rule: VersionRule = attr.field(eq=False)

    def __str__(self) -> str:
        return f"{self.display_prefix} ({self.name})"

    @property
    def display_prefix(self) -> str:
        return "".join(map(escape_byte, self.prefix))

    @property
    def rule_name(self) -> str:
        return self.rule.__name__

    def format(self, peer_id: bytes) -> str:
        return self.rule(self.name, peer_id)


def compare_prefix(prefix: bytes, peer_id: bytes) -> int:
    """
    Compare ``prefix`` against the start of ``peer_id``, considering only as
    many bytes as the shorter of the two has.  Returns a negative number, zero,
    or a positive number as the prefix sorts before, matches, or sorts after
    the peer ID.
    """
    n = min(len(prefix), len(peer_id))
    a, b = prefix[:n], peer_id[:n]
    return (a > b) - (a < b)


@attr.define(frozen=True)
class ClientRegistry:
    """
    An immutable table of `ClientRecord`\\s sorted by prefix.

    The table is checked on construction: records must be in strictly
    increasing prefix order, and no prefix may be a prefix of another.  This
    guarantees that at most one record can match the start of a full-length
    peer ID and that binary search finds the same record as a linear scan.
    """

    records: tuple[ClientRecord, ...] = attr.field(converter=tuple)

    def __attrs_post_init__(self) -> None:
        self.check()
        log.debug("Loaded client registry with %d entries", len(self.records))

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[ClientRecord]:
        return iter(self.records)

    @classmethod
    def from_table(
        cls, table: Iterable[tuple[bytes, str, VersionRule]]
    ) -> ClientRegistry:
        return cls(
            ClientRecord(prefix=prefix, name=name, rule=rule)
            for prefix, name, rule in table
        )

    def check(self) -> None:
        if any(not rec.prefix for rec in self.records):
            raise RegistryError("Registry contains an empty prefix")
        for prev, rec in zip(self.records, self.records[1:]):
            if rec.prefix == prev.prefix:
                raise RegistryError(f"Duplicate prefix in registry: {prev}, {rec}")
            elif rec.prefix < prev.prefix:
                raise RegistryError(f"Registry not sorted: {prev} precedes {rec}")
            elif rec.prefix.startswith(prev.prefix):
                # Any record extending a prefix sorts immediately after it, so
                # adjacent pairs are all that need checking.
                raise RegistryError(
                    f"Overlapping prefixes in registry: {prev}, {rec}"
                )

    def lookup(self, peer_id: bytes) -> Optional[ClientRecord]:
        if not peer_id:
            return None
        lo, hi = 0, len(self.records)
        while lo < hi:
            mid = (lo + hi) // 2
            if compare_prefix(self.records[mid].prefix, peer_id) < 0:
                lo = mid + 1
            else:
                hi = mid
        if (
            lo < len(self.records)
            and compare_prefix(self.records[lo].prefix, peer_id) == 0
        ):
            rec = self.records[lo]
            log.log(TRACE, "Peer ID %r matches registry entry %s", peer_id, rec)
            return rec
        else:
            return None
