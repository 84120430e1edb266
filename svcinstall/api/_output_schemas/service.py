"""Output schemas for service commands."""

from pydantic import Field

from ._base import BaseOutputSchema


class ServiceInstallOutput(BaseOutputSchema):
    """Output schema for service install command."""
    message: str = Field(..., description="Summary message")
    installed: bool = Field(..., description="Whether every install stage completed")
    service_name: str = Field(..., description="Systemd service name, empty string if config could not be loaded")
    files: list[str] = Field(..., description="Paths of generated files")


class ServiceUninstallOutput(BaseOutputSchema):
    """Output schema for service uninstall command."""
    message: str = Field(..., description="Summary message")
    uninstalled: bool = Field(..., description="Whether the final daemon-reload succeeded")
    service_name: str = Field(..., description="Systemd service name, empty string if config could not be loaded")
    files: list[str] = Field(..., description="Paths that uninstall attempted to remove")


class ServiceRenderOutput(BaseOutputSchema):
    """Output schema for service render command."""
    message: str = Field(..., description="Summary message")
    service_name: str = Field(..., description="Systemd service name, empty string if config could not be loaded")
    files: dict[str, str] = Field(..., description="Generated file contents keyed by target path")
