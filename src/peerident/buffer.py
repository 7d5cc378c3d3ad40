from __future__ import annotations
import attr


@attr.define
class OutputBuffer:
    """
    A fixed-capacity, NUL-terminated label buffer.

    ``capacity`` counts bytes of UTF-8 and includes the terminator, so a buffer
    never holds more than ``capacity - 1`` bytes of label text.  Writing a
    longer label silently truncates it (without splitting a multibyte
    character); writing a label containing a NUL byte keeps only the text
    before it, just as a C string would.
    """

    capacity: int
    data: bytes = attr.field(default=b"", init=False)

    def __attrs_post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(
                f"Output buffer capacity must be at least 1, got {self.capacity}"
            )

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.data)

    def __bool__(self) -> bool:
        return bool(self.data)

    @property
    def value(self) -> str:
        return self.data.decode("utf-8")

    @property
    def raw(self) -> bytes:
        return self.data + b"\0"

    def clear(self) -> None:
        self.data = b""

    def write(self, label: str) -> None:
        blob = label.encode("utf-8").split(b"\0", 1)[0]
        if len(blob) > self.capacity - 1:
            blob = blob[: self.capacity - 1]
            # Drop any partial character left at the cut
            blob = blob.decode("utf-8", "ignore").encode("utf-8")
        self.data = blob
