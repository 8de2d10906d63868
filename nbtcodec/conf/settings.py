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

from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from nbtcodec.utils.yaml import dict_from_extended_yaml

DEFAULT_MAX_DEPTH = 512
DEFAULT_MAX_BYTES_LENGTH = 16 * 1024 * 1024


class CodecSettings(BaseModel):
    """Limits applied by serializers and deserializers.

    Settings are immutable, a different configuration is a new instance that can be passed as `settings=` when building
    a serializer or deserializer.
    """
    model_config = ConfigDict(extra='forbid', frozen=True)

    # Maximum number of nested lists/compounds, deeper payloads fail with DepthLimitError
    MAX_DEPTH: int = Field(default=DEFAULT_MAX_DEPTH, gt=0)

    # Maximum length of a single byte block read or written, `None` disables the check. Fixed-size values go through
    # the same check, so it can't be less than 8 (the size of a Long or Double)
    MAX_BYTES_LENGTH: Optional[int] = Field(default=DEFAULT_MAX_BYTES_LENGTH, ge=8)

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'CodecSettings':
        """Takes a filepath to a yaml file and returns the validated CodecSettings instance."""
        settings_dict = dict_from_extended_yaml(filepath=filepath)
        return cls.model_validate(settings_dict)
