from .client import ControlPlaneError, ProxmoxControlPlane

__all__ = ["ControlPlaneError", "ProxmoxControlPlane"]
