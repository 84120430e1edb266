"""Output schemas for svcinstall commands."""

from ._base import BaseOutputSchema
from .service import ServiceInstallOutput, ServiceRenderOutput, ServiceUninstallOutput

__all__ = [
    "BaseOutputSchema",
    "ServiceInstallOutput",
    "ServiceRenderOutput",
    "ServiceUninstallOutput",
]
