import os
import typing

import yaml
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


def _merge(base: dict[str, typing.Any], other: dict[str, typing.Any]) -> dict:
    merged = dict(base)
    for key, value in other.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings_files(
    settings_file_names: str | list[str], settings_dirname: str
) -> dict[str, typing.Any]:
    """
    Read one or more YAML settings files into a single mapping.

    Files are merged in order, so values of later files win. Nested mappings
    are merged key by key instead of being replaced.

    :param settings_file_names: file name, or list of file names, relative to
        ``settings_dirname``
    :param settings_dirname: directory holding the settings files

    :return: merged settings
    :raises FileNotFoundError: if one of the files does not exist
    """
    if isinstance(settings_file_names, str):
        settings_file_names = [settings_file_names]

    values: dict[str, typing.Any] = {}
    for file_name in settings_file_names:
        path = os.path.join(settings_dirname, file_name)
        if not os.path.isfile(path):
            raise FileNotFoundError(f"Settings file not found: {path}")
        with open(path, encoding="utf-8") as f:
            values = _merge(values, yaml.safe_load(f) or {})
    return values


class BaseServiceSettings(BaseSettings):
    """
    Settings read from YAML files, overridable through environment variables.

    Environment variables take precedence over the files. Nested fields are
    addressed with ``__``, e.g. ``SVC__MAIN__SERVER__PORT``.
    """

    model_config = SettingsConfigDict(env_prefix="SVC__", env_nested_delimiter="__")

    def __init__(
        self,
        settings_file_names: str | list[str],
        settings_dirname: str,
        **values: typing.Any,
    ) -> None:
        file_values = load_settings_files(settings_file_names, settings_dirname)
        super().__init__(**_merge(file_values, values))

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # file values arrive as init kwargs and must rank below the environment
        return env_settings, init_settings, dotenv_settings, file_secret_settings
