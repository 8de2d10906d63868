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

from nbtcodec.exception import (
    DepthLimitError,
    InvalidKeyTypeError,
    NBTError,
    SizeMismatchError,
    TypeMismatchError,
    UnknownFieldError,
    UnsupportedTypeError,
)
from nbtcodec.fields import nbt_field
from nbtcodec.marshal import dump, dumps, marshal
from nbtcodec.nbt_types import tag_type_of
from nbtcodec.serialization import (
    BadDataError,
    Deserializer,
    OutOfDataError,
    OverReadError,
    SerializationError,
    Serializer,
    TooLongError,
)
from nbtcodec.tag_type import TagType
from nbtcodec.types import Byte, Double, Float, Int, IntArray, Long, LongArray, Short
from nbtcodec.unmarshal import load, loads, unmarshal, unmarshal_into
from nbtcodec.version import __version__

__all__ = [
    '__version__',
    # codec
    'marshal',
    'unmarshal',
    'unmarshal_into',
    'dump',
    'dumps',
    'load',
    'loads',
    'tag_type_of',
    'nbt_field',
    'Serializer',
    'Deserializer',
    # types
    'TagType',
    'Byte',
    'Short',
    'Int',
    'Long',
    'Float',
    'Double',
    'IntArray',
    'LongArray',
    # errors
    'NBTError',
    'SerializationError',
    'OutOfDataError',
    'OverReadError',
    'BadDataError',
    'TooLongError',
    'UnsupportedTypeError',
    'TypeMismatchError',
    'SizeMismatchError',
    'InvalidKeyTypeError',
    'UnknownFieldError',
    'DepthLimitError',
]
