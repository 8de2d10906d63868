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
This module implements encoding of tag types and of named tag headers.

A header is the tag type byte followed by the name as a UTF-8 string. `END` is never named, so its header is just the
tag type byte.

>>> se = Serializer.build_bytes_serializer()
>>> encode_tag_header(se, TagType.BYTE, 'ByteTag')  # writes 01 0007 42797465546167
>>> encode_tag_header(se, TagType.END, '')  # writes 00
>>> bytes(se.finalize()).hex()
'0100074279746554616700'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0100074279746554616700'))
>>> decode_tag_header(de)
(<TagType.BYTE: 1>, 'ByteTag')
>>> decode_tag_header(de)
(<TagType.END: 0>, '')
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0d'))
>>> try:
...     decode_tag_type(de)
... except ValueError as e:
...     print(*e.args)
invalid tag type: 13
"""

from nbtcodec.serialization import Deserializer, Serializer
from nbtcodec.serialization.exceptions import BadDataError
from nbtcodec.tag_type import TagType

from .utf8 import decode_utf8, encode_utf8


def encode_tag_type(serializer: Serializer, tag_type: TagType) -> None:
    assert tag_type is not TagType.UNKNOWN
    serializer.write_byte(tag_type)


def decode_tag_type(deserializer: Deserializer) -> TagType:
    raw = deserializer.read_byte()
    if raw > TagType.LONG_ARRAY:
        raise BadDataError(f'invalid tag type: {raw}')
    return TagType(raw)


def encode_tag_header(serializer: Serializer, tag_type: TagType, name: str) -> None:
    """ Encodes the tag type and, unless it is `END`, the name.
    """
    encode_tag_type(serializer, tag_type)
    if tag_type is not TagType.END:
        encode_utf8(serializer, name)


def decode_tag_header(deserializer: Deserializer) -> tuple[TagType, str]:
    """ Decodes a tag type and its name, `END` has no name and yields `''`.
    """
    tag_type = decode_tag_type(deserializer)
    if tag_type is TagType.END:
        return tag_type, ''
    return tag_type, decode_utf8(deserializer)
