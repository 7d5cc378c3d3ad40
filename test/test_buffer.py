import pytest
from peerident.buffer import OutputBuffer


def test_new_buffer_is_empty() -> None:
    buf = OutputBuffer(16)
    assert str(buf) == ""
    assert buf.raw == b"\0"
    assert not buf
    assert len(buf) == 0


@pytest.mark.parametrize(
    "capacity,label,value",
    [
        (16, "Transmission", "Transmission"),
        (13, "Transmission", "Transmission"),
        (12, "Transmission", "Transmissio"),
        (1, "Transmission", ""),
        (12, "µTorrent 3.4.1", "µTorrent 3"),
        (11, "µTorrent 3.4.1", "µTorrent "),
        (2, "µTorrent", ""),
        (3, "µTorrent", "µ"),
        (32, "Amazon S3 \0.0.0", "Amazon S3 "),
        (32, "", ""),
    ],
)
def test_write(capacity: int, label: str, value: str) -> None:
    buf = OutputBuffer(capacity)
    buf.write(label)
    assert buf.value == value
    assert len(buf.raw) <= capacity
    assert buf.raw == value.encode("utf-8") + b"\0"


def test_write_replaces_contents() -> None:
    buf = OutputBuffer(32)
    buf.write("BitComet 2.00")
    buf.write("Tixati")
    assert str(buf) == "Tixati"
    buf.clear()
    assert str(buf) == ""


@pytest.mark.parametrize("capacity", [0, -1])
def test_bad_capacity(capacity: int) -> None:
    with pytest.raises(ValueError):
        OutputBuffer(capacity)
