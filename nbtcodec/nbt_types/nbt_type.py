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

from abc import ABC, abstractmethod
from typing import Any, Generic, NamedTuple, TypeVar, final

from nbtcodec.exception import TypeMismatchError, UnsupportedTypeError
from nbtcodec.nbt_types.utils import TypeAliasMap, TypeToNBTTypeMap, get_usable_origin_type, unwrap_new_type
from nbtcodec.serialization import Deserializer, Serializer
from nbtcodec.tag_type import TagType

T = TypeVar('T')


class NBTType(ABC, Generic[T]):
    """ This class is used to model a host type and how its values are written as (and read from) a tag payload.

    An instance is built from a type hint with `NBTType.from_type`, compound hints (lists, maps, records) build the
    instances of their inner types, so the result is a tree that mirrors the hint. Instances are immutable and can be
    shared between calls and threads.

    Only payloads are handled here, the tag type and name of a named tag are the caller's responsibility (see
    `nbtcodec.marshal` and the compound encoders).
    """

    class TypeMap(NamedTuple):
        alias_map: TypeAliasMap
        nbt_types_map: TypeToNBTTypeMap
        # whether a sequence of Byte/Int/Long uses the array tags instead of a List, only applies to the outermost
        # sequence being built, inner types always go back to `True`
        prefer_arrays: bool = True

    # XXX: subclasses must override this if they need any properties
    __slots__ = ()

    # XXX: subclasses must initialize this property
    _tag_type: TagType

    @final
    @staticmethod
    def from_type(type_: Any, /, *, type_map: TypeMap) -> NBTType:
        """ Instantiate a NBTType instance from a type hint using the given maps.

        `NewType` aliases are replaced by their supertype before anything else, so they behave exactly like it.
        """
        type_ = unwrap_new_type(type_)
        usable_origin = get_usable_origin_type(type_, type_map=type_map)
        nbt_type_class = type_map.nbt_types_map[usable_origin]
        return nbt_type_class._from_type(type_, type_map=type_map)

    @classmethod
    def _from_type(cls, type_: Any, /, *, type_map: TypeMap) -> NBTType:
        """ Instantiate a NBTType instance from a type hint.

        The implementation is expected to inspect the given type's origin and args to check for compatibility and to
        use `NBTType.from_type` for inner types, forwarding the given `type_map`. It may return an instance of a
        different class when the hint calls for it (a `list[Int]` is an IntArray, for instance).
        """
        raise UnsupportedTypeError(f'{cls.__name__} cannot be used in a NBTType.TypeMap')

    @property
    def tag_type(self) -> TagType:
        """ The tag type this type is written as, for dynamically typed values it is only a default."""
        return self._tag_type

    def get_tag_type(self, value: T, /) -> TagType:
        """ The tag type that the given value will be written as."""
        return self._tag_type

    def accepts(self, tag_type: TagType, /) -> bool:
        """ Whether a payload of the given tag type can be decoded into this type."""
        return tag_type is self._tag_type

    @final
    def check_value(self, value: T, /) -> None:
        """ Raise a TypeMismatchError if the value's type is not compatible, or ValueError if it's out of range.

        Unlike when serializing, compound values are checked recursively.
        """
        # XXX: subclasses must implement NBTType._check_value, not NBTType.check_value
        self._check_value(value, deep=True)

    @final
    def serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Serialize the payload of a value.

        Serialization includes a shallow check_value, inner values are checked when they are serialized.
        """
        # XXX: subclasses must implement NBTType._serialize, not NBTType.serialize
        self._check_value(value, deep=False)
        self._serialize(serializer, value)

    @final
    def deserialize(self, deserializer: Deserializer, tag_type: TagType | None = None, /) -> T:
        """ Deserialize a payload of the given tag type, which defaults to this type's own tag type.
        """
        if tag_type is None:
            tag_type = self._tag_type
        self.check_tag_type(tag_type)
        # XXX: subclasses must implement NBTType._deserialize, not NBTType.deserialize
        return self._deserialize(deserializer, tag_type)

    def deserialize_into(self, deserializer: Deserializer, tag_type: TagType, target: T, /) -> None:
        """ Deserialize a payload by updating an existing value, only compound types support it."""
        raise UnsupportedTypeError(f'cannot decode {tag_type.name} into an existing {type(target).__name__}')

    @final
    def check_tag_type(self, tag_type: TagType, /) -> None:
        """ Raise UnsupportedTypeError for a compound into a type that has no fields or keys, or TypeMismatchError for
        any other tag type that this type does not accept.
        """
        if self.accepts(tag_type):
            return
        if tag_type is TagType.COMPOUND:
            raise UnsupportedTypeError(f'cannot decode COMPOUND into {self!r}, expected a record or a mapping')
        raise TypeMismatchError(f'cannot decode {tag_type.name} into {self!r}')

    @final
    def to_bytes(self, value: T, /) -> bytes:
        """ Shortcut to quickly convert a value T to its payload `bytes` and avoid using the serialization system.
        """
        serializer = Serializer.build_bytes_serializer()
        self.serialize(serializer, value)
        return bytes(serializer.finalize())

    @final
    def from_bytes(self, data: bytes, /) -> T:
        """ Shortcut to quickly parse a payload of this type's tag type from `bytes`.
        """
        deserializer = Deserializer.build_bytes_deserializer(data)
        value = self.deserialize(deserializer)
        deserializer.finalize()
        return value

    def __repr__(self) -> str:
        return f'{type(self).__name__}()'

    @abstractmethod
    def zero(self) -> T:
        """ Value used for fixed-size slots and record fields that are absent from the stream."""
        raise NotImplementedError

    @abstractmethod
    def _check_value(self, value: T, /, *, deep: bool) -> None:
        """ Inner implementation of `NBTType.check_value`.

        Compound values should use `NBTType._check_value` on the inner type(s) instead of `NBTType.check_value` and
        pass the appropriate deep argument.
        """
        raise NotImplementedError

    @abstractmethod
    def _serialize(self, serializer: Serializer, value: T, /) -> None:
        """ Inner implementation of `serialize`, you can assume that the given value has been "shallow checked".

        When implementing the serialization with compound encoders, `NBTType.serialize` should be passed as an
        `Encoder` instead of `NBTType._serialize`, so inner values are checked as well.
        """
        raise NotImplementedError

    @abstractmethod
    def _deserialize(self, deserializer: Deserializer, tag_type: TagType, /) -> T:
        """ Inner implementation of `deserialize`, the tag type is guaranteed to be accepted by this type.
        """
        raise NotImplementedError
