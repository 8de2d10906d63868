import io

import pytest

from nbtcodec import Int, dump, dumps
from nbtcodec.serialization import Deserializer, OutOfDataError, OverReadError, SerializationError, Serializer


class _ChunkedReader:
    """ Returns at most `chunk_size` bytes per read, like a socket would."""

    def __init__(self, data: bytes, chunk_size: int) -> None:
        self._data = data
        self._chunk_size = chunk_size

    def read(self, n: int = -1) -> bytes:
        if n < 0:
            n = len(self._data)
        n = min(n, self._chunk_size)
        chunk, self._data = self._data[:n], self._data[n:]
        return chunk


class _GreedyReader:
    """ Broken file object that returns more than what was asked."""

    def read(self, n: int = -1) -> bytes:
        return b'\x00' * (n + 1)


class _FlushCounter(io.BytesIO):
    def __init__(self) -> None:
        super().__init__()
        self.flushes = 0

    def flush(self) -> None:
        self.flushes += 1
        super().flush()


class _ShortWriter:
    """ Takes at most `chunk_size` bytes per write, like a non-blocking socket would."""

    def __init__(self, chunk_size: int) -> None:
        self.data = bytearray()
        self._chunk_size = chunk_size

    def write(self, data: bytes) -> int:
        chunk = bytes(data[:self._chunk_size])
        self.data.extend(chunk)
        return len(chunk)

    def flush(self) -> None:
        pass


class _BlockedWriter:
    """ Raw file object in non-blocking mode that can't take any data."""

    def write(self, data: bytes) -> None:
        return None


def test_stream_short_reads() -> None:
    de = Deserializer.build_stream_deserializer(_ChunkedReader(b'abcdefgh', 3))
    assert bytes(de.read_bytes(5)) == b'abcde'
    assert de.peek_byte() == ord('f')
    assert bytes(de.peek_bytes(2)) == b'fg'
    assert de.read_byte() == ord('f')
    assert bytes(de.read_bytes(2)) == b'gh'
    assert de.is_empty()
    de.finalize()


def test_stream_truncated() -> None:
    de = Deserializer.build_stream_deserializer(io.BytesIO(b'abc'))
    with pytest.raises(OutOfDataError):
        de.read_bytes(4)

    de = Deserializer.build_stream_deserializer(io.BytesIO(b''))
    with pytest.raises(OutOfDataError):
        de.read_byte()


def test_stream_over_read() -> None:
    de = Deserializer.build_stream_deserializer(_GreedyReader())
    with pytest.raises(OverReadError):
        de.read_bytes(4)


def test_stream_trailing_data() -> None:
    de = Deserializer.build_stream_deserializer(io.BytesIO(b'ab'))
    assert de.read_byte() == ord('a')
    with pytest.raises(SerializationError, match='trailing data'):
        de.finalize()


def test_stream_serializer() -> None:
    fp = _FlushCounter()
    se = Serializer.build_stream_serializer(fp)
    se.write_byte(1)
    se.write_bytes(b'\x02\x03')
    assert se.cur_pos() == 3
    se.flush()
    assert fp.flushes == 1
    assert fp.getvalue() == b'\x01\x02\x03'
    with pytest.raises(TypeError):
        se.finalize()


def test_stream_short_writes() -> None:
    fp = _ShortWriter(3)
    se = Serializer.build_stream_serializer(fp)
    se.write_bytes(b'abcdefgh')
    se.write_byte(0x69)
    assert se.cur_pos() == 9
    assert bytes(fp.data) == b'abcdefghi'

    value = {'name': 'steve', 'scores': [Int(1), Int(2)], 'blob': b'\x00' * 10}
    fp = _ShortWriter(2)
    dump(fp, 'player', value)
    assert bytes(fp.data) == dumps('player', value)


def test_stream_blocked_write() -> None:
    se = Serializer.build_stream_serializer(_BlockedWriter())
    with pytest.raises(SerializationError):
        se.write_bytes(b'abc')
