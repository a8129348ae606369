"""Removal of runtime state from listed objects."""

from typing import Any, Dict, Sequence

from ..model.kubernetes import K8sObject, object_namespace
from ..model.redaction import DEFAULT_POLICY, RedactionPolicy


def remove_nested_field(obj: Dict[str, Any], *path: str) -> None:
    """Delete obj[path[0]]...[path[-1]] if every step along the way is a map."""
    node: Any = obj
    for key in path[:-1]:
        if not isinstance(node, dict):
            return
        node = node.get(key)
    if isinstance(node, dict):
        node.pop(path[-1], None)


def remove_fields(obj: K8sObject, paths: Sequence[Sequence[str]]) -> None:
    for path in paths:
        remove_nested_field(obj, *path)


def clean_state(obj: K8sObject, policy: RedactionPolicy = DEFAULT_POLICY) -> K8sObject:
    """Strip controller-managed and volatile fields from obj in place.

    Namespaced objects additionally lose the policy's namespaced-only fields.
    The object is returned for convenience.
    """
    remove_fields(obj, policy.paths_for(object_namespace(obj)))
    return obj
