"""
Exception classes for the Acorn bootstrap system.

Import your exceptions like:
    from bootstrap.exceptions import BootstrapError, PhaseExecutionError, ...
"""

from typing import List, Optional


class BootstrapError(RuntimeError):
    """
    Base exception for all bootstrap-related errors.

    Raised when the application cannot be constructed or bootstrapped.
    """

    def __init__(self, message: str, component_id: Optional[str] = None, phase: Optional[str] = None):
        super().__init__(message)
        self.component_id = component_id
        self.phase = phase

    def __str__(self) -> str:
        base_msg = super().__str__()

        context_parts = []
        if self.phase:
            context_parts.append(f"phase={self.phase}")
        if self.component_id:
            context_parts.append(f"component={self.component_id}")

        if context_parts:
            return f"{base_msg} ({', '.join(context_parts)})"
        return base_msg


class ConfigurationError(BootstrapError):
    """
    Raised when configuration loading fails.

    This includes unreadable configuration files and configuration
    files that do not contain a top-level mapping.
    """
    pass


class InvalidApplicationError(ConfigurationError):
    """
    Raised when the application class handed to the Bootloader does not
    satisfy the ApplicationContract.
    """

    def __init__(self, message: str, application_class: object = None, missing: Optional[List[str]] = None):
        super().__init__(message, component_id=getattr(application_class, '__name__', None))
        self.application_class = application_class
        self.missing = missing or []

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.missing:
            return f"{base_msg}\nMissing members:\n  - " + "\n  - ".join(self.missing)
        return base_msg


class PhaseExecutionError(BootstrapError):
    """
    Raised when a bootstrap phase fails.

    The original exception is chained as ``__cause__``.
    """
    pass


class ProviderRegistrationError(BootstrapError):
    """
    Raised when a service provider cannot be resolved or registered.
    """
    pass


class BindingResolutionError(BootstrapError):
    """
    Raised when the service container is asked for an abstract it cannot build.
    """
    pass


__all__ = [
    'BootstrapError',
    'ConfigurationError',
    'InvalidApplicationError',
    'PhaseExecutionError',
    'ProviderRegistrationError',
    'BindingResolutionError',
]
