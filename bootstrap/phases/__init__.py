from .base_phase import BootstrapPhase, PhaseResult
from .boot_providers_phase import BootProviders
from .capture_request_phase import CaptureRequest
from .handle_exceptions_phase import HandleExceptions
from .load_configuration_phase import LoadConfiguration
from .register_console_phase import RegisterConsole
from .register_facades_phase import RegisterFacades
from .register_providers_phase import RegisterProviders
from .theme_features_phase import ThemeFeatures

__all__ = [
    'BootstrapPhase', 'PhaseResult',
    'CaptureRequest', 'ThemeFeatures', 'LoadConfiguration', 'HandleExceptions',
    'RegisterProviders', 'RegisterFacades', 'BootProviders', 'RegisterConsole',
]
