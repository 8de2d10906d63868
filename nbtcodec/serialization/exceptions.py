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

from nbtcodec.exception import NBTError


class SerializationError(NBTError, ValueError):
    """Base class for errors raised while writing to a serializer or reading from a deserializer."""
    pass


class OutOfDataError(SerializationError):
    """The source ended before the requested amount of bytes could be read."""
    pass


class OverReadError(SerializationError):
    """The source returned more bytes than were requested."""
    pass


class BadDataError(SerializationError):
    """The bytes read don't form a valid value: unknown tag byte, negative length, invalid UTF-8, ..."""
    pass


class TooLongError(SerializationError):
    pass
