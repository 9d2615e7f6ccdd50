from helm_oci.core.registry_client.abc import RegistryClient
from helm_oci.core.registry_client.real import RealRegistryClient
from helm_oci.core.registry_client.types import Credentials, RegistryClientError

__all__ = [
    "Credentials",
    "RealRegistryClient",
    "RegistryClient",
    "RegistryClientError",
]
