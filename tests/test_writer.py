import io
import math

import pytest

from folderbench.errors import WriteError
from folderbench.writer import fill_buffer, write_to_size


class CountingStream(io.BytesIO):

    def __init__(self):
        super().__init__()
        self.writes = 0
        self.flushes = 0

    def write(self, data):
        self.writes += 1
        return super().write(data)

    def flush(self):
        self.flushes += 1


class BrokenStream(CountingStream):

    def __init__(self, fail_after):
        super().__init__()
        self.fail_after = fail_after

    def write(self, data):
        if self.writes == self.fail_after:
            raise OSError("connection reset")
        return super().write(data)


def test_fill_buffer_in_place():
    buf = bytearray(16)
    before = id(buf)
    fill_buffer(buf, ord("q"))
    assert buf == b"q" * 16
    fill_buffer(buf, ord("Z"))
    assert buf == b"Z" * 16
    assert id(buf) == before
    assert len(buf) == 16


@pytest.mark.parametrize("target,bufsize", [
    (4096, 4096),
    (4097, 4096),
    (1, 128),
    (10000, 128),
    (10 * 1024 * 1024, 65536),
    (100, 300),
])
def test_writes_ceil_of_target_over_buffer(target, bufsize):
    stream = CountingStream()
    buf = bytearray(b"x" * bufsize)
    written = write_to_size(stream, buf, target)
    calls = math.ceil(target / bufsize)
    assert stream.writes == calls
    assert written == calls * bufsize
    assert len(stream.getvalue()) == written
    assert target <= written < target + bufsize
    assert stream.flushes == 1


def test_overshoot_is_kept():
    stream = CountingStream()
    assert write_to_size(stream, bytearray(1000), 1001) == 2000


def test_write_failure_raises_write_error():
    stream = BrokenStream(fail_after=2)
    with pytest.raises(WriteError) as exc:
        write_to_size(stream, bytearray(128), 1024)
    assert isinstance(exc.value.__cause__, OSError)
    assert stream.writes == 2


def test_empty_buffer_rejected():
    with pytest.raises(ValueError):
        write_to_size(CountingStream(), bytearray(), 10)
