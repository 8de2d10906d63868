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

r"""
This module implements utf-8 string encoding with a length prefix, used for tag names and String payloads.

The length is the number of encoded bytes (not characters) as an unsigned 16-bit big-endian integer. The text is
standard UTF-8, Java's "modified UTF-8" (NUL as `c080`, surrogate pairs) is not supported.

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'foobar')  # writes 0006666f6f626172
>>> encode_utf8(se, 'π')  # writes 0002cf80
>>> encode_utf8(se, '')  # writes 0000
>>> bytes(se.finalize()).hex()
'0006666f6f6261720002cf800000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0006666f6f6261720002cf800000'))
>>> decode_utf8(de)  # reads 0006666f6f626172
'foobar'
>>> decode_utf8(de)  # reads 0002cf80
'π'
>>> decode_utf8(de)  # reads 0000
''
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0001ff'))
>>> try:
...     decode_utf8(de)
... except ValueError as e:
...     print(*e.args)
invalid UTF-8 string
"""

from nbtcodec.serialization import Deserializer, Serializer
from nbtcodec.serialization.consts import MAX_STRING_LENGTH
from nbtcodec.serialization.exceptions import BadDataError, TooLongError

from .int import decode_int, encode_int


def encode_utf8(serializer: Serializer, value: str) -> None:
    """ Encodes a string using UTF-8 and adding a length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(value, str)
    data = value.encode('utf-8')
    if len(data) > MAX_STRING_LENGTH:
        raise TooLongError(f'string is too long: {len(data)} bytes')
    encode_int(serializer, len(data), length=2, signed=False)
    serializer.write_bytes(data)


def decode_utf8(deserializer: Deserializer) -> str:
    """ Decodes a UTF-8 string with a length prefix.

    This modules's docstring has more details and examples.
    """
    size = decode_int(deserializer, length=2, signed=False)
    if size == 0:
        return ''
    data = deserializer.read_bytes(size)
    try:
        return bytes(data).decode('utf-8')
    except UnicodeDecodeError as e:
        raise BadDataError('invalid UTF-8 string') from e
