"""Kubernetes interaction module."""

from .client import K8sClient, K8sClientError

__all__ = ["K8sClient", "K8sClientError"]
