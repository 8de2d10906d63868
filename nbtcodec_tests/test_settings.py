import pytest
from pydantic import ValidationError

from nbtcodec.conf import UNITTESTS_SETTINGS_FILEPATH, CodecSettings
from nbtcodec.conf.get_settings import (
    CONFIG_YAML_ENV_VAR,
    _reset_global_settings,
    get_global_settings,
    get_settings_source,
)
from nbtcodec.conf.settings import DEFAULT_MAX_BYTES_LENGTH, DEFAULT_MAX_DEPTH


def test_defaults() -> None:
    settings = CodecSettings()
    assert settings.MAX_DEPTH == DEFAULT_MAX_DEPTH == 512
    assert settings.MAX_BYTES_LENGTH == DEFAULT_MAX_BYTES_LENGTH == 16 * 1024 * 1024


def test_validation() -> None:
    with pytest.raises(ValidationError):
        CodecSettings(MAX_DEPTH=0)
    with pytest.raises(ValidationError):
        CodecSettings(MAX_BYTES_LENGTH=4)
    with pytest.raises(ValidationError):
        CodecSettings(UNKNOWN_SETTING=1)

    settings = CodecSettings()
    with pytest.raises(ValidationError):
        settings.MAX_DEPTH = 1  # type: ignore[misc]


def test_unittests_settings() -> None:
    settings = CodecSettings.from_yaml(filepath=UNITTESTS_SETTINGS_FILEPATH)
    assert settings.MAX_DEPTH == 128
    assert settings.MAX_BYTES_LENGTH == 1024 * 1024


def test_from_yaml(tmp_path) -> None:
    base = tmp_path / 'base.yml'
    base.write_text('MAX_DEPTH: 100\nMAX_BYTES_LENGTH: 1024\n')
    custom = tmp_path / 'custom.yml'
    custom.write_text('extends: base.yml\nMAX_BYTES_LENGTH: null\n')

    assert CodecSettings.from_yaml(filepath=base) == CodecSettings(MAX_DEPTH=100, MAX_BYTES_LENGTH=1024)
    assert CodecSettings.from_yaml(filepath=custom) == CodecSettings(MAX_DEPTH=100, MAX_BYTES_LENGTH=None)


def test_from_yaml_empty(tmp_path) -> None:
    empty = tmp_path / 'empty.yml'
    empty.write_text('')
    assert CodecSettings.from_yaml(filepath=empty) == CodecSettings()


def test_from_yaml_errors(tmp_path) -> None:
    with pytest.raises(ValueError, match='is not a file'):
        CodecSettings.from_yaml(filepath=tmp_path / 'missing.yml')

    not_a_dict = tmp_path / 'list.yml'
    not_a_dict.write_text('- 1\n- 2\n')
    with pytest.raises(ValueError, match='cannot be parsed as a dictionary'):
        CodecSettings.from_yaml(filepath=not_a_dict)

    itself = tmp_path / 'itself.yml'
    itself.write_text('extends: itself.yml\n')
    with pytest.raises(ValueError, match='cannot extend itself'):
        CodecSettings.from_yaml(filepath=itself)

    invalid = tmp_path / 'invalid.yml'
    invalid.write_text('MAX_DEPTH: -1\n')
    with pytest.raises(ValidationError):
        CodecSettings.from_yaml(filepath=invalid)


def test_global_settings(tmp_path, monkeypatch) -> None:
    first = tmp_path / 'first.yml'
    first.write_text('MAX_DEPTH: 7\n')
    second = tmp_path / 'second.yml'
    second.write_text('MAX_DEPTH: 8\n')

    _reset_global_settings()
    try:
        monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(first))
        settings = get_global_settings()
        assert settings.MAX_DEPTH == 7
        assert get_settings_source() == str(first)
        assert get_global_settings() is settings

        monkeypatch.setenv(CONFIG_YAML_ENV_VAR, str(second))
        with pytest.raises(Exception, match='different file'):
            get_global_settings()

        _reset_global_settings()
        monkeypatch.delenv(CONFIG_YAML_ENV_VAR)
        assert get_global_settings() == CodecSettings()
        assert get_settings_source() is None
    finally:
        _reset_global_settings()
