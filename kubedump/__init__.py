"""Point-in-time export of Kubernetes cluster state to per-object files."""

__version__ = "0.4.0"
