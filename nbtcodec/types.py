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
Sized host types.

Python's `int` and `float` don't carry a width, these subclasses do, so that a value held in a dynamically typed slot
(`Any`, `dict[str, Any]`) still knows which tag it must be written as. They compare and hash like the builtin values.

>>> Short(1234) == 1234
True
>>> Short(40000)
Traceback (most recent call last):
...
ValueError: 40000 is out of range for Short
>>> Float(0.5)
Float(0.5)
"""

from __future__ import annotations

import struct
from typing import ClassVar

from typing_extensions import Self

__all__ = [
    'Byte',
    'Double',
    'Float',
    'Int',
    'IntArray',
    'Long',
    'LongArray',
    'Short',
]


class _SizedInt(int):
    __slots__ = ()

    # XXX: subclass must define these values:
    _signed: ClassVar[bool]
    _byte_size: ClassVar[int]

    def __new__(cls, value: int = 0) -> Self:
        self = super().__new__(cls, value)
        if not cls.lower_bound() <= self <= cls.upper_bound():
            raise ValueError(f'{int(value)} is out of range for {cls.__name__}')
        return self

    @classmethod
    def upper_bound(cls) -> int:
        if cls._signed:
            return 2**(cls._byte_size * 8 - 1) - 1
        else:
            return 2**(cls._byte_size * 8) - 1

    @classmethod
    def lower_bound(cls) -> int:
        if cls._signed:
            return -(2**(cls._byte_size * 8 - 1))
        else:
            return 0

    def __repr__(self) -> str:
        return f'{type(self).__name__}({int(self)})'


class Byte(_SizedInt):
    """ Unsigned 8-bit integer, the payload of a Byte tag."""
    __slots__ = ()
    _signed = False
    _byte_size = 1


class Short(_SizedInt):
    """ Signed 16-bit integer."""
    __slots__ = ()
    _signed = True
    _byte_size = 2


class Int(_SizedInt):
    """ Signed 32-bit integer."""
    __slots__ = ()
    _signed = True
    _byte_size = 4


class Long(_SizedInt):
    """ Signed 64-bit integer."""
    __slots__ = ()
    _signed = True
    _byte_size = 8


_float32 = struct.Struct('>f')


class Float(float):
    """ IEEE-754 binary32 value.

    The value is rounded to the nearest binary32 on construction, which makes encoding and decoding lossless.
    """
    __slots__ = ()

    def __new__(cls, value: float = 0.0) -> Self:
        try:
            rounded, = _float32.unpack(_float32.pack(value))
        except (OverflowError, struct.error):
            raise ValueError(f'{value!r} is out of range for Float')
        return super().__new__(cls, rounded)

    def __repr__(self) -> str:
        return f'Float({float(self)!r})'


class Double(float):
    """ IEEE-754 binary64 value, same as the builtin `float` but explicitly tagged."""
    __slots__ = ()

    def __repr__(self) -> str:
        return f'Double({float(self)!r})'


class IntArray(list):
    """ List of `Int` values that is always encoded as an IntArray tag."""

    def __repr__(self) -> str:
        return f'IntArray({list.__repr__(self)})'


class LongArray(list):
    """ List of `Long` values that is always encoded as a LongArray tag."""

    def __repr__(self) -> str:
        return f'LongArray({list.__repr__(self)})'
