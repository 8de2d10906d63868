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

import os
from typing import NamedTuple, Optional

from nbtcodec.conf.settings import CodecSettings

CONFIG_YAML_ENV_VAR = 'NBTCODEC_CONFIG_YAML'


class _SettingsMetadata(NamedTuple):
    source: Optional[str]
    settings: CodecSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> CodecSettings:
    """
    Returns the process-wide settings.

    They are loaded from the yaml filepath in the 'NBTCODEC_CONFIG_YAML' env var when it is set, otherwise the defaults
    are used. The settings are loaded once, changing the env var afterwards is an error.
    """
    source = os.environ.get(CONFIG_YAML_ENV_VAR) or None
    return _load_settings_singleton(source)


def get_settings_source() -> Optional[str]:
    """ Returns the path of the YAML file that was loaded, `None` means the defaults are in use.

    XXX: Will raise an assertion error if get_global_settings() wasn't used before.
    """
    assert _settings_singleton is not None, 'get_global_settings() not called before'
    return _settings_singleton.source


def _load_settings_singleton(source: Optional[str]) -> CodecSettings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')
        return _settings_singleton.settings

    settings = _load_yaml_settings(source) if source is not None else CodecSettings()
    _settings_singleton = _SettingsMetadata(source=source, settings=settings)
    return settings


def _load_yaml_settings(filepath: str) -> CodecSettings:
    return CodecSettings.from_yaml(filepath=filepath)


def _reset_global_settings() -> None:
    """Forget the loaded settings, only meant to be used by tests."""
    global _settings_singleton
    _settings_singleton = None
