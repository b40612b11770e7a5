from .application_port import ApplicationContract, implements_application_contract, missing_contract_members
from .environment_port import EnvironmentPort
from .hook_port import HookPort
from .theme_port import ThemePort

__all__ = [
    'ApplicationContract', 'implements_application_contract', 'missing_contract_members',
    'EnvironmentPort', 'HookPort', 'ThemePort',
]
