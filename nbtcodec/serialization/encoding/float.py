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

"""
This module implements encoding of IEEE-754 floats, either binary32 (`length=4`) or binary64 (`length=8`).

The bits are written big-endian as they are, there is no rounding or normalization.

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 0.5, length=4)  # writes 3f000000
>>> encode_float(se, -2.0, length=8)  # writes c000000000000000
>>> bytes(se.finalize()).hex()
'3f000000c000000000000000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('3f000000c000000000000000'))
>>> decode_float(de, length=4)
0.5
>>> decode_float(de, length=8)
-2.0
>>> de.finalize()

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_float(se, 1e39, length=4)
... except ValueError as e:
...     print(*e.args)
1e+39 does not fit in a 4-byte float
"""

import struct

from nbtcodec.serialization import Deserializer, Serializer

_FORMATS = {
    4: struct.Struct('>f'),
    8: struct.Struct('>d'),
}


def _get_struct(length: int) -> struct.Struct:
    try:
        return _FORMATS[length]
    except KeyError:
        raise ValueError(f'invalid float length: {length}')


def encode_float(serializer: Serializer, number: float, *, length: int) -> None:
    """ Encode a float using 4 or 8 bytes.
    """
    fmt = _get_struct(length)
    try:
        data = fmt.pack(number)
    except (OverflowError, struct.error):
        raise ValueError(f'{number!r} does not fit in a {length}-byte float')
    serializer.write_bytes(data)


def decode_float(deserializer: Deserializer, *, length: int) -> float:
    """ Decode a float from 4 or 8 bytes.
    """
    fmt = _get_struct(length)
    number, = fmt.unpack(deserializer.read_bytes(length))
    return number
