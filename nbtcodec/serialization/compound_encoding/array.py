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
An array is a count followed by that many values, there is no element tag type, it's implied by the array kind.

Layout: [N: signed int32][value_0]...[value_N]

This is the payload of IntArray and LongArray tags, and the tail of a List payload.

>>> from functools import partial
>>> from nbtcodec.serialization.encoding.int import decode_int, encode_int
>>> se = Serializer.build_bytes_serializer()
>>> encode_array(se, [1, -1, 256], partial(encode_int, length=4, signed=True))
>>> bytes(se.finalize()).hex()
'0000000300000001ffffffff00000100'

Breakdown of the result:

    00000003: 3, the count
    00000001: 1
    ffffffff: -1
    00000100: 256

When decoding, the count is read first, the caller then reads that many values:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0000000300000001ffffffff00000100'))
>>> [decode_int(de, length=4, signed=True) for _ in range(decode_count(de))]
[1, -1, 256]
>>> de.finalize()

A negative count is read as zero, unless clamping is disabled:

>>> decode_count(Deserializer.build_bytes_deserializer(bytes.fromhex('ffffffff')))
0
>>> decode_count(Deserializer.build_bytes_deserializer(bytes.fromhex('ffffffff')), clamp=False)
Traceback (most recent call last):
...
nbtcodec.serialization.exceptions.BadDataError: negative length: -1
"""

from collections.abc import Collection
from typing import TypeVar

from nbtcodec.serialization import Deserializer, Serializer
from nbtcodec.serialization.consts import MAX_SEQUENCE_LENGTH
from nbtcodec.serialization.encoding.int import decode_int, encode_int
from nbtcodec.serialization.exceptions import BadDataError, TooLongError

from . import Encoder

T = TypeVar('T')


def encode_count(serializer: Serializer, count: int) -> None:
    if count > MAX_SEQUENCE_LENGTH:
        raise TooLongError(f'too many elements: {count}')
    encode_int(serializer, count, length=4, signed=True)


def decode_count(deserializer: Deserializer, *, clamp: bool = True) -> int:
    """ Decodes an element count.

    Negative counts are read as zero, with `clamp=False` they are invalid instead, which is what ByteArray lengths do.
    """
    count = decode_int(deserializer, length=4, signed=True)
    if count < 0:
        if not clamp:
            raise BadDataError(f'negative length: {count}')
        return 0
    return count


def encode_array(serializer: Serializer, values: Collection[T], encoder: Encoder[T]) -> None:
    encode_count(serializer, len(values))
    for value in values:
        encoder(serializer, value)
