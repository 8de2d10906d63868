import pytest

from nbtcodec import DepthLimitError, TooLongError, dumps, loads
from nbtcodec.conf.settings import CodecSettings


def _nested_lists(depth: int) -> list:
    value: list = []
    for _ in range(depth - 1):
        value = [value]
    return value


def test_depth_limit_on_write() -> None:
    settings = CodecSettings(MAX_DEPTH=3)
    dumps('', _nested_lists(3), settings=settings)
    with pytest.raises(DepthLimitError):
        dumps('', _nested_lists(4), settings=settings)


def test_depth_limit_on_read() -> None:
    settings = CodecSettings(MAX_DEPTH=3)
    assert loads(dumps('', _nested_lists(3)), settings=settings) == ('', _nested_lists(3))
    with pytest.raises(DepthLimitError):
        loads(dumps('', _nested_lists(4)), settings=settings)


def test_depth_limit_counts_compounds() -> None:
    settings = CodecSettings(MAX_DEPTH=2)
    dumps('', {'a': {}}, settings=settings)
    with pytest.raises(DepthLimitError):
        dumps('', {'a': {'b': {}}}, settings=settings)
    with pytest.raises(DepthLimitError):
        dumps('', {'a': [[]]}, settings=settings)


def test_max_bytes_length() -> None:
    settings = CodecSettings(MAX_BYTES_LENGTH=8)
    data = dumps('', b'12345678')
    assert loads(data, bytes, settings=settings) == ('', b'12345678')

    with pytest.raises(TooLongError):
        dumps('', b'123456789', settings=settings)
    with pytest.raises(TooLongError):
        loads(dumps('', b'123456789'), bytes, settings=settings)


def test_no_max_bytes_length() -> None:
    settings = CodecSettings(MAX_BYTES_LENGTH=None)
    value = b'\x01' * (16 * 1024 * 1024 + 1)
    assert loads(dumps('', value, settings=settings), bytes, settings=settings) == ('', value)
