from clyro.registry.client import RegistryClient
from clyro.registry.download import download_component, resolve_alias_path
from clyro.registry.model import ComponentDescriptor, ComponentFile, RegistryComponent

__all__ = [
    "RegistryClient",
    "download_component",
    "resolve_alias_path",
    "ComponentDescriptor",
    "ComponentFile",
    "RegistryComponent",
]
