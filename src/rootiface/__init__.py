"""rootiface - memoized method lookup for code generator root interfaces."""

__version__ = "0.1.0"

from rootiface.application.services.registry import RootInterfaceRegistry
from rootiface.domain.model.configuration import RegistryConfig
from rootiface.domain.model.root_interface_info import RootInterfaceInfo

__all__ = ["RegistryConfig", "RootInterfaceInfo", "RootInterfaceRegistry", "__version__"]
