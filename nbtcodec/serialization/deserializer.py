# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import IO, TYPE_CHECKING, Iterator, final

from nbtcodec.exception import DepthLimitError

from .exceptions import BadDataError, OutOfDataError, OverReadError, SerializationError, TooLongError
from .types import Buffer

if TYPE_CHECKING:
    from nbtcodec.conf.settings import CodecSettings

    from .bytes_deserializer import BytesDeserializer
    from .stream_deserializer import StreamDeserializer


class Deserializer(ABC):
    def __init__(self, *, settings: CodecSettings | None = None) -> None:
        if settings is None:
            from nbtcodec.conf.get_settings import get_global_settings
            settings = get_global_settings()
        self._settings = settings
        self._depth = 0

    @property
    def settings(self) -> CodecSettings:
        return self._settings

    def finalize(self) -> None:
        """Check that all bytes were consumed, the deserializer should not be used after this."""
        if not self.is_empty():
            raise SerializationError('trailing data')

    @staticmethod
    def build_bytes_deserializer(data: Buffer, *, settings: CodecSettings | None = None) -> BytesDeserializer:
        from .bytes_deserializer import BytesDeserializer
        return BytesDeserializer(data, settings=settings)

    @staticmethod
    def build_stream_deserializer(fp: IO[bytes], *, settings: CodecSettings | None = None) -> StreamDeserializer:
        from .stream_deserializer import StreamDeserializer
        return StreamDeserializer(fp, settings=settings)

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def peek_byte(self) -> int:
        """Read a single byte but don't consume from buffer."""
        raise NotImplementedError

    @abstractmethod
    def peek_bytes(self, n: int) -> Buffer:
        """Read n bytes but don't consume from buffer."""
        raise NotImplementedError

    @abstractmethod
    def read_byte(self) -> int:
        """Read a single byte as unsigned int."""
        raise NotImplementedError

    @abstractmethod
    def _read_bytes(self, n: int) -> Buffer:
        """Read up to n bytes, it's up to `read_bytes` to check that the expected amount was read."""
        raise NotImplementedError

    @final
    def read_bytes(self, n: int) -> Buffer:
        """Read exactly n bytes.

        Fails with `OutOfDataError` if the source ends before that and with `OverReadError` if the source yields more
        than what was asked. The settings' `MAX_BYTES_LENGTH` limits the length of data read per call.
        """
        if n < 0:
            raise BadDataError(f'cannot read a negative amount of bytes: {n}')
        max_bytes = self._settings.MAX_BYTES_LENGTH
        if max_bytes is not None and n > max_bytes:
            raise TooLongError(f'cannot read {n} bytes, the limit is {max_bytes}')
        data = self._read_bytes(n)
        if len(data) < n:
            raise OutOfDataError(f'not enough bytes to read: wanted {n}, got {len(data)}')
        if len(data) > n:
            raise OverReadError(f'read more bytes than requested: wanted {n}, got {len(data)}')
        return data

    @contextmanager
    def nested(self) -> Iterator[None]:
        """Context for reading the payload of a list or compound, fails when going deeper than `MAX_DEPTH`."""
        max_depth = self._settings.MAX_DEPTH
        if self._depth >= max_depth:
            raise DepthLimitError(f'cannot nest more than {max_depth} lists/compounds')
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
