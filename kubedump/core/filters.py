"""Resource type and object selection."""

from typing import AbstractSet

from ..model.kubernetes import ResourceType


def skip_resource(
    resource: ResourceType,
    want_resources: AbstractSet[str],
    ignore_resources: AbstractSet[str],
) -> bool:
    """Return True if a discovered resource type must not be dumped."""
    # we can only dump what we can list
    if "list" not in resource.verbs:
        return True

    if resource.is_subresource:
        return True

    if want_resources and resource.name not in want_resources:
        return True

    if ignore_resources and resource.name in ignore_resources:
        return True

    return False


def skip_item(
    namespace: str,
    namespaced: bool,
    clusterscoped: bool,
    want_namespaces: AbstractSet[str],
    ignore_namespaces: AbstractSet[str],
) -> bool:
    """Return True if a listed object must not be dumped.

    ``namespace`` is empty for cluster-scoped objects. An empty allow-list
    means no restriction.
    """
    if namespace and not namespaced:
        return True

    if not namespace and not clusterscoped:
        return True

    if want_namespaces and namespace not in want_namespaces:
        return True

    if ignore_namespaces and namespace in ignore_namespaces:
        return True

    return False
