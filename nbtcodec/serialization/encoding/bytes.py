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
This modules implements encoding of byte sequence by prefixing it with the length of the sequence encoded as a signed
32-bit big-endian integer, which is the payload of a ByteArray tag.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test')  # will prepend 00000004 before writing b'test'
>>> bytes(se.finalize()).hex()
'0000000474657374'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000000474657374'))
>>> decode_bytes(de)
b'test'
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000000474657374666f6f'))
>>> _ = decode_bytes(de)
>>> try:
...     de.finalize()
... except ValueError as e:
...     print(*e.args)
trailing data

A negative length is not clamped to zero, it is invalid:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('ffffffff'))
>>> try:
...     decode_bytes(de)
... except ValueError as e:
...     print(*e.args)
cannot read a negative amount of bytes: -1

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000000474'))
>>> try:
...     decode_bytes(de)
... except ValueError as e:
...     print(*e.args)
not enough bytes to read: wanted 4, got 1
"""

from nbtcodec.serialization import Deserializer, Serializer

from .int import decode_int, encode_int


def encode_bytes(serializer: Serializer, data: bytes) -> None:
    """ Encodes a byte-sequence adding a length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(data, (bytes, bytearray, memoryview))
    encode_int(serializer, len(data), length=4, signed=True)
    serializer.write_bytes(data)


def decode_bytes(deserializer: Deserializer) -> bytes:
    """ Decodes a byte-sequence with a length prefix.

    This modules's docstring has more details and examples.
    """
    size = decode_int(deserializer, length=4, signed=True)
    return bytes(deserializer.read_bytes(size))
