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
Reading named tags.

The payload of the root tag is decoded into a type, which is `Any` by default: in that case each tag is decoded into
its native class (`Byte`, `Short`, ..., `str`, `bytes`, `list`, `dict`).
"""

from __future__ import annotations

from typing import IO, Any

from structlog import get_logger

from nbtcodec.conf.settings import CodecSettings
from nbtcodec.nbt_types import make_nbt_type_for_type, make_nbt_type_for_value
from nbtcodec.serialization import Deserializer
from nbtcodec.serialization.encoding.tag import decode_tag_header
from nbtcodec.tag_type import TagType

logger = get_logger()


def unmarshal(deserializer: Deserializer, type_: Any = Any) -> tuple[str, Any]:
    """ Read a named tag and decode its payload into `type_`, returns the name and the value.

    If the stream starts with an `END` tag type, nothing else is read and the name is `''` and the value is the zero
    value of the type (`None` for `Any`).

    Raises OutOfDataError when the stream ends early, TypeMismatchError when the payload cannot be decoded into the
    type, SizeMismatchError when a fixed-size sequence is too small, UnknownFieldError when a compound has a tag that
    a record doesn't know about and UnsupportedTypeError or InvalidKeyTypeError when the type itself can't be used.
    A compound read into a type that is neither a record nor a mapping is also an UnsupportedTypeError.
    """
    nbt_type = make_nbt_type_for_type(type_)
    tag_type, name = decode_tag_header(deserializer)
    logger.debug('unmarshal', name=name, tag_type=tag_type.name)
    if tag_type is TagType.END:
        return '', nbt_type.zero()
    return name, nbt_type.deserialize(deserializer, tag_type)


def unmarshal_into(deserializer: Deserializer, target: Any, *, type_: Any = None) -> str:
    """ Read a named tag and decode its compound payload into an existing record instance or mutable mapping.

    Record fields and mapping keys that are not in the compound are left untouched. `type_` defaults to the runtime
    type of the target. Returns the name of the tag, an `END` tag type returns `''` without changing the target.
    """
    nbt_type = make_nbt_type_for_value(target) if type_ is None else make_nbt_type_for_type(type_)
    tag_type, name = decode_tag_header(deserializer)
    logger.debug('unmarshal', name=name, tag_type=tag_type.name)
    if tag_type is TagType.END:
        return ''
    nbt_type.deserialize_into(deserializer, tag_type, target)
    return name


def loads(data: bytes, type_: Any = Any, *, settings: CodecSettings | None = None) -> tuple[str, Any]:
    """ Same as `unmarshal` from a byte sequence, which must not have anything after the tag."""
    deserializer = Deserializer.build_bytes_deserializer(data, settings=settings)
    result = unmarshal(deserializer, type_)
    deserializer.finalize()
    return result


def load(fp: IO[bytes], type_: Any = Any, *, settings: CodecSettings | None = None) -> tuple[str, Any]:
    """ Same as `unmarshal` from a binary file object, only the bytes of the tag are consumed."""
    deserializer = Deserializer.build_stream_deserializer(fp, settings=settings)
    return unmarshal(deserializer, type_)
