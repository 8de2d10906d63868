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
A compound is a sequence of named tags terminated by an `END` tag type.

Layout: ([tag type][name][payload])...[00]

>>> from nbtcodec.serialization.encoding.utf8 import decode_utf8, encode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> encode_compound(se, [(TagType.STRING, 'a', 'x'), (TagType.STRING, 'b', 'yz')], encode_utf8)
>>> bytes(se.finalize()).hex()
'08000161000178080001620002797a00'

Breakdown of the result:

    08 0001 61: String named 'a'
    0001 78: 'x'
    08 0001 62: String named 'b'
    0002 797a: 'yz'
    00: End

When decoding, the entry decoder gets the tag type and name of each entry and must consume its payload, the result is
the list of names and decoded values in the order they were read:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('08000161000178080001620002797a00'))
>>> decode_compound(de, lambda de, tag_type, name: decode_utf8(de))
[('a', 'x'), ('b', 'yz')]
>>> de.finalize()
"""

from collections.abc import Iterable
from typing import Callable, TypeVar

from nbtcodec.serialization import Deserializer, Serializer
from nbtcodec.serialization.encoding.tag import decode_tag_header, encode_tag_header, encode_tag_type
from nbtcodec.tag_type import TagType

from . import Encoder

T = TypeVar('T')


def encode_compound(
    serializer: Serializer,
    entries: Iterable[tuple[TagType, str, T]],
    encoder: Encoder[T],
) -> None:
    with serializer.nested():
        for tag_type, name, value in entries:
            encode_tag_header(serializer, tag_type, name)
            encoder(serializer, value)
        encode_tag_type(serializer, TagType.END)


def decode_compound(
    deserializer: Deserializer,
    decoder: Callable[[Deserializer, TagType, str], T],
) -> list[tuple[str, T]]:
    entries: list[tuple[str, T]] = []
    with deserializer.nested():
        while True:
            tag_type, name = decode_tag_header(deserializer)
            if tag_type is TagType.END:
                break
            entries.append((name, decoder(deserializer, tag_type, name)))
    return entries
