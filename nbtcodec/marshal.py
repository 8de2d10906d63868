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
Writing named tags.

A value is written as a named tag: the tag type, the name, then the payload. The tag type and payload come from the
value's NBTType, which is built from `type_` when it's given or from the runtime type of the value otherwise.
"""

from __future__ import annotations

from typing import IO, Any

from structlog import get_logger

from nbtcodec.conf.settings import CodecSettings
from nbtcodec.nbt_types import AnyNBTType, make_nbt_type_for_type
from nbtcodec.serialization import Serializer
from nbtcodec.serialization.compound_encoding.compound import encode_compound
from nbtcodec.serialization.encoding.tag import encode_tag_header
from nbtcodec.tag_type import TagType

logger = get_logger()

_ANY_NBT_TYPE = AnyNBTType()


def marshal(serializer: Serializer, name: str, value: Any, *, type_: Any = None) -> None:
    """ Write `value` as a tag named `name` and flush the serializer.

    A `None` value is written as an empty compound. When `type_` is `None` the tag type is taken from the runtime type
    of the value.

    Raises UnsupportedTypeError when the type has no tag type, TypeMismatchError when the value doesn't match its
    declared type and ValueError when a number doesn't fit its tag type. Nothing is undone when an error is raised,
    the bytes written until then stay in the serializer.
    """
    nbt_type = _ANY_NBT_TYPE if type_ is None else make_nbt_type_for_type(type_)
    if value is None and (type_ is None or nbt_type.tag_type is TagType.COMPOUND):
        tag_type = TagType.COMPOUND
        logger.debug('marshal', name=name, tag_type=tag_type.name)
        encode_tag_header(serializer, tag_type, name)
        encode_compound(serializer, (), _ANY_NBT_TYPE.serialize)
    else:
        tag_type = nbt_type.get_tag_type(value)
        logger.debug('marshal', name=name, tag_type=tag_type.name)
        encode_tag_header(serializer, tag_type, name)
        nbt_type.serialize(serializer, value)
    serializer.flush()


def dumps(name: str, value: Any, *, type_: Any = None, settings: CodecSettings | None = None) -> bytes:
    """ Same as `marshal`, but returns the bytes instead of writing them to a serializer."""
    serializer = Serializer.build_bytes_serializer(settings=settings)
    marshal(serializer, name, value, type_=type_)
    return bytes(serializer.finalize())


def dump(
    fp: IO[bytes],
    name: str,
    value: Any,
    *,
    type_: Any = None,
    settings: CodecSettings | None = None,
) -> None:
    """ Same as `marshal`, writing to a binary file object, which is flushed at the end."""
    serializer = Serializer.build_stream_serializer(fp, settings=settings)
    marshal(serializer, name, value, type_=type_)
