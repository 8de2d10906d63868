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

from .exceptions import TooLongError
from .types import Buffer

if TYPE_CHECKING:
    from nbtcodec.conf.settings import CodecSettings

    from .bytes_serializer import BytesSerializer
    from .stream_serializer import StreamSerializer


class Serializer(ABC):
    def __init__(self, *, settings: CodecSettings | None = None) -> None:
        if settings is None:
            from nbtcodec.conf.get_settings import get_global_settings
            settings = get_global_settings()
        self._settings = settings
        self._depth = 0

    @property
    def settings(self) -> CodecSettings:
        return self._settings

    def finalize(self) -> Buffer:
        """Get the resulting byte sequence, the serializer cannot be reused after this."""
        raise TypeError('this serializer does not support finalization')

    @staticmethod
    def build_bytes_serializer(*, settings: CodecSettings | None = None) -> BytesSerializer:
        from .bytes_serializer import BytesSerializer
        return BytesSerializer(settings=settings)

    @staticmethod
    def build_stream_serializer(fp: IO[bytes], *, settings: CodecSettings | None = None) -> StreamSerializer:
        from .stream_serializer import StreamSerializer
        return StreamSerializer(fp, settings=settings)

    @abstractmethod
    def cur_pos(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def write_byte(self, data: int) -> None:
        """Write a single byte."""
        raise NotImplementedError

    @abstractmethod
    def _write_bytes(self, data: Buffer) -> None:
        # XXX: it is recommended that implementors of Serializer specialize this implementation
        for byte in bytes(memoryview(data)):
            self.write_byte(byte)

    @final
    def write_bytes(self, data: Buffer) -> None:
        """Write a byte sequence.

        To avoid accidental big writes, the settings' `MAX_BYTES_LENGTH` limits the length of data written per call.
        """
        max_bytes = self._settings.MAX_BYTES_LENGTH
        if max_bytes is not None and len(data) > max_bytes:
            raise TooLongError('result is too long')
        self._write_bytes(data)

    def flush(self) -> None:
        """Push any buffered bytes to the underlying sink, in-memory serializers have nothing to do."""
        pass

    @contextmanager
    def nested(self) -> Iterator[None]:
        """Context for writing the payload of a list or compound, fails when going deeper than `MAX_DEPTH`."""
        max_depth = self._settings.MAX_DEPTH
        if self._depth >= max_depth:
            raise DepthLimitError(f'cannot nest more than {max_depth} lists/compounds')
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
