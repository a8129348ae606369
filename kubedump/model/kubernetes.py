"""Kubernetes discovery models."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

# Listed objects stay schema-less: a tree of dicts, lists and scalars.
K8sObject = Dict[str, Any]


class GroupVersion(BaseModel):
    """One served version of an API group."""

    group_version: str = Field(alias="groupVersion")
    version: str

    class Config:
        populate_by_name = True


class APIGroup(BaseModel):
    """API group and the versions it serves."""

    name: str = ""
    versions: List[GroupVersion] = []

    class Config:
        populate_by_name = True


class ResourceType(BaseModel):
    """Kubernetes resource type information."""

    name: str
    kind: str
    namespaced: bool = False
    verbs: List[str] = []
    api_group: str = ""
    version: str

    @property
    def group_version(self) -> str:
        """apiVersion string of the resource."""
        return f"{self.api_group}/{self.version}" if self.api_group else self.version

    @property
    def resource_and_group(self) -> str:
        """Directory key for the resource, e.g. "pods" or "pods.metrics.k8s.io".

        The plural alone is not unique across groups, so the group is appended
        unless it is the core group.
        """
        return f"{self.name}.{self.api_group}" if self.api_group else self.name

    @property
    def is_subresource(self) -> bool:
        """Subresources are reported as "<parent>/<sub>", e.g. "pods/status"."""
        return "/" in self.name

    @property
    def api_path(self) -> str:
        """Collection path of the resource across all namespaces."""
        if self.api_group:
            return f"/apis/{self.api_group}/{self.version}/{self.name}"
        return f"/api/{self.version}/{self.name}"

    def __str__(self) -> str:
        return f"{self.group_version}, Resource={self.name}"


def object_name(obj: K8sObject) -> str:
    """Get the object name."""
    return (obj.get("metadata") or {}).get("name", "")


def object_namespace(obj: K8sObject) -> str:
    """Get the object namespace, empty for cluster-scoped objects."""
    return (obj.get("metadata") or {}).get("namespace") or ""
