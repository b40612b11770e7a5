from __future__ import annotations

from typing import Any, List, Sequence, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from bootstrap.exceptions import ConfigurationError
from bootstrap.signals.bootstrap_signals import BASE_PATH_OVERRIDE, BOOTLOADER_PRIORITY, DEFAULT_BOOT_SIGNALS
from core.utils import import_string

DEFAULT_APPLICATION = 'application.application.Application'


class BootloaderConfig(BaseModel):
    """
    Construction parameters for the Bootloader.

    Pure-data fields stay strict; ``application_class`` accepts either a
    class or its dotted import path.
    """

    model_config = ConfigDict(extra='forbid', arbitrary_types_allowed=True, frozen=True)

    signals: List[str] = Field(
        default_factory=lambda: list(DEFAULT_BOOT_SIGNALS),
        description='Host lifecycle signals, any of which opens the readiness gate',
    )
    application_class: Union[str, Type[Any]] = Field(
        default=DEFAULT_APPLICATION,
        description='Application class (or dotted path) constructed at boot',
    )
    priority: int = Field(
        default=BOOTLOADER_PRIORITY,
        description='Priority the Bootloader subscribes to each signal with',
    )
    base_path_override: str = Field(
        default=BASE_PATH_OVERRIDE,
        description='Host constant / environment variable that fixes the base path',
    )

    @field_validator('signals', mode='before')
    @classmethod
    def _coerce_signals(cls, value: Any) -> List[str]:
        if isinstance(value, str):
            return [value]
        return list(value)

    def resolve_application_class(self) -> Type[Any]:
        if isinstance(self.application_class, str):
            try:
                return import_string(self.application_class)
            except ImportError as exc:
                raise ConfigurationError(f"Cannot import application class '{self.application_class}': {exc}") from exc
        return self.application_class

    @classmethod
    def from_params(cls, signals: Union[str, Sequence[str], None] = None, **kwargs) -> 'BootloaderConfig':
        """Convenience constructor; ``None`` values fall back to the defaults."""
        params = {k: v for k, v in kwargs.items() if v is not None}
        if signals is not None:
            params['signals'] = signals
        try:
            return cls(**params)
        except ValidationError as e:
            raise ConfigurationError(f'Invalid bootloader configuration: {e}') from e
