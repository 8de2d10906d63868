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

from typing import IO, TYPE_CHECKING

from typing_extensions import override

from .exceptions import SerializationError
from .serializer import Serializer
from .types import Buffer

if TYPE_CHECKING:
    from nbtcodec.conf.settings import CodecSettings


class StreamSerializer(Serializer):
    """Serializer that writes straight to a binary file object.

    Nothing is buffered here, `flush()` is forwarded to the file object. Short writes (raw, unbuffered file objects
    may take fewer bytes than given) are retried with the rest of the data.
    """

    def __init__(self, fp: IO[bytes], *, settings: CodecSettings | None = None) -> None:
        super().__init__(settings=settings)
        self._fp = fp
        self._pos: int = 0

    def _write_all(self, data: Buffer) -> None:
        view = memoryview(data).cast('B')
        while view:
            written = self._fp.write(view)
            if written is None:
                # non-blocking raw file object that isn't ready
                raise SerializationError('the file object cannot take more data')
            view = view[written:]
            self._pos += written

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_byte(self, data: int) -> None:
        self._write_all(int.to_bytes(data, 1, 'big'))

    @override
    def _write_bytes(self, data: Buffer) -> None:
        self._write_all(data)

    @override
    def flush(self) -> None:
        self._fp.flush()
