"""LXC Gateway - authenticated HTTP front for a Proxmox node's containers."""

__version__ = "1.0.0"
