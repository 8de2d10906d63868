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

"""Exception hierarchy of the codec.

Every error raised by `nbtcodec` derives from `NBTError`. Each class also derives from the builtin exception that best
describes it, so callers that only know about `TypeError`/`ValueError` keep working.
"""

from __future__ import annotations


class NBTError(Exception):
    """Base class for exceptions in nbtcodec."""
    pass


class UnsupportedTypeError(NBTError, TypeError):
    """Raised when a host type (or value) has no tag type mapping, or a tag type has no valid target shape."""
    pass


class TypeMismatchError(NBTError, TypeError):
    """Raised when a wire tag type is not compatible with the target, or a value doesn't match its declared type."""
    pass


class InvalidKeyTypeError(NBTError, TypeError):
    """Raised when a mapping used as a compound does not have `str` keys."""
    pass


class SizeMismatchError(NBTError, ValueError):
    """Raised when a fixed-size sequence cannot hold the number of elements that were found."""

    def __init__(self, message: str, *, capacity: int, count: int) -> None:
        super().__init__(f'{message}: capacity={capacity}, count={count}')
        self.capacity = capacity
        self.count = count


class UnknownFieldError(NBTError, ValueError):
    """Raised when a compound carries a field name that the target record does not declare."""

    def __init__(self, name: str, record: type) -> None:
        super().__init__(f'no field named {name!r} in {record.__name__}')
        self.name = name
        self.record = record


class DepthLimitError(NBTError, ValueError):
    """Raised when lists/compounds are nested deeper than the configured limit."""
    pass
