from helm_oci.core.provision.provisioner import BinaryProvisioner
from helm_oci.core.provision.types import InstallStrategy, ProvisionError

__all__ = ["BinaryProvisioner", "InstallStrategy", "ProvisionError"]
