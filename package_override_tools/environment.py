# SPDX-FileCopyrightText: 2024 Espressif Systems (Shanghai) CO LTD
# SPDX-License-Identifier: Apache-2.0
"""
Settings of the tool, read from environment variables.
"""

import typing as t

from pydantic import Field, field_validator
from pydantic_core.core_schema import ValidationInfo, ValidatorFunctionWrapHandler
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


def _env_to_bool(value: t.Any) -> bool:
    """Returns True if environment variable is set to 1, t, y, yes, true, or False otherwise"""
    if isinstance(value, bool):
        return value

    return str(value).lower() in {'1', 't', 'true', 'y', 'yes'}


class PackageOverrideSettings(BaseSettings):
    """
    Settings of override-package-version.

    Every field is read from the environment variable with the
    ``PACKAGE_OVERRIDE_`` prefix, e.g. ``PACKAGE_OVERRIDE_DEBUG_MODE=1``.
    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_prefix='PACKAGE_OVERRIDE_',
    )

    # by default log-level is hint(15)
    DEBUG_MODE: bool = Field(False, description='Enable debug output.')  # log-level: debug(10)

    NO_HINTS: bool = Field(
        False, description='Disable hints in the output.'
    )  # log-level: notice/info(20)

    NO_COLORS: bool = Field(False, description='Disable colored output.')

    @field_validator('*', mode='wrap')
    @classmethod
    def fallback_to_default(
        cls, v: t.Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> t.Any:
        field = cls.model_fields[info.field_name]

        try:
            if v is None:
                return field.default

            if field.annotation is bool:
                return _env_to_bool(v)

            return handler(v)
        except Exception:  # any broken value falls back to default
            return field.default

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: t.Type[BaseSettings],  # noqa: ARG003
        init_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
    ) -> t.Tuple[PydanticBaseSettingsSource, ...]:
        # only the environment is consulted
        return (env_settings,)
