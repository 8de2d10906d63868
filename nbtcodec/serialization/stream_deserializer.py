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

from .deserializer import Deserializer
from .exceptions import BadDataError, OutOfDataError

if TYPE_CHECKING:
    from nbtcodec.conf.settings import CodecSettings


class StreamDeserializer(Deserializer):
    """Deserializer that reads from a binary file object.

    Peeked bytes are kept in a small pushback buffer and handed out before reading from the file object again. Short
    reads are retried until the file object signals EOF by returning no data.
    """

    def __init__(self, fp: IO[bytes], *, settings: CodecSettings | None = None) -> None:
        super().__init__(settings=settings)
        self._fp = fp
        self._pushback = b''

    def _fill(self, n: int) -> None:
        """Try to have at least n bytes in the pushback buffer."""
        while len(self._pushback) < n:
            chunk = self._fp.read(n - len(self._pushback))
            if not chunk:
                break
            self._pushback += chunk

    @override
    def is_empty(self) -> bool:
        self._fill(1)
        return not self._pushback

    @override
    def peek_byte(self) -> int:
        self._fill(1)
        if not self._pushback:
            raise OutOfDataError('not enough bytes to read')
        return self._pushback[0]

    @override
    def peek_bytes(self, n: int) -> bytes:
        if n < 0:
            raise BadDataError('value cannot be negative')
        self._fill(n)
        if len(self._pushback) < n:
            raise OutOfDataError('not enough bytes to read')
        return self._pushback[:n]

    @override
    def read_byte(self) -> int:
        b = self.peek_byte()
        self._pushback = self._pushback[1:]
        return b

    @override
    def _read_bytes(self, n: int) -> bytes:
        data = self._pushback[:n]
        self._pushback = self._pushback[n:]
        while len(data) < n:
            chunk = self._fp.read(n - len(data))
            if not chunk:
                break
            data += chunk
        return data
