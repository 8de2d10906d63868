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

from types import UnionType
from typing import Any, Union, get_args as _typing_get_args, get_origin as _typing_get_origin


def is_subclass(cls: Any, class_or_tuple: type | tuple[type, ...]) -> bool:
    """ Same as `issubclass`, but follows `NewType` to its supertype and returns `False` for non-classes.

    >>> from typing import NewType
    >>> Name = NewType('Name', str)
    >>> is_subclass(Name, str)
    True
    >>> is_subclass(list[int], list)
    False
    >>> is_subclass(bool, int)
    True
    """
    while hasattr(cls, '__supertype__'):
        cls = cls.__supertype__
    if not isinstance(cls, type):
        return False
    return issubclass(cls, class_or_tuple)


def is_union(type_: Any) -> bool:
    """ Whether the hint is a `Union[...]` or `X | Y`.

    >>> is_union(int | None)
    True
    >>> is_union(list[int])
    False
    """
    return get_origin(type_) in (Union, UnionType)


def get_origin(type_: Any) -> Any:
    return _typing_get_origin(type_)


def get_args(type_: Any) -> tuple[Any, ...]:
    return _typing_get_args(type_)
