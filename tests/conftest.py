"""Test configuration and fixtures."""

import copy
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

import pytest

from kubedump.k8s.client import K8sClient, K8sClientError
from kubedump.model.kubernetes import APIGroup, GroupVersion, ResourceType


def make_resource(
    name: str,
    group: str = "",
    version: str = "v1",
    kind: str = "",
    namespaced: bool = True,
    verbs: Optional[List[str]] = None,
) -> ResourceType:
    """Build a discovered resource type."""
    return ResourceType(
        name=name,
        kind=kind or name.rstrip("s").title(),
        namespaced=namespaced,
        verbs=["get", "list", "watch"] if verbs is None else verbs,
        api_group=group,
        version=version,
    )


def make_object(name: str, namespace: str = "", **extra) -> Dict[str, Any]:
    """Build a listed object carrying typical runtime state."""
    metadata = {
        "name": name,
        "uid": "0c8f4f5e-6f2a-4c2b-9c1d-1b5f0c9a7e11",
        "resourceVersion": "12345",
        "creationTimestamp": "2024-01-01T12:00:00Z",
        "managedFields": [{"manager": "kubectl", "operation": "Apply"}],
        "labels": {"app": name},
    }
    if namespace:
        metadata["namespace"] = namespace
    obj = {"apiVersion": "v1", "kind": "Thing", "metadata": metadata, "status": {"phase": "Ready"}}
    obj.update(extra)
    return obj


def build_cluster_client(cluster: Dict[str, Dict[str, Any]], failing=()) -> Mock:
    """Mock K8sClient serving a fake cluster.

    ``cluster`` maps group versions ("v1", "apps/v1") to
    ``{"resources": [ResourceType], "objects": {resource name: [objects]}}``.
    Resource names in ``failing`` raise on listing; a group version whose
    value is None fails discovery.
    """
    client = Mock(spec=K8sClient)

    groups: Dict[str, APIGroup] = {}
    for group_version in cluster:
        group, _, version = group_version.rpartition("/")
        groups.setdefault(group, APIGroup(name=group))
        groups[group].versions.append(GroupVersion(group_version=group_version, version=version))
    client.get_server_groups.return_value = list(groups.values())

    def get_api_resources(group_version):
        if cluster.get(group_version) is None:
            raise K8sClientError(f"/apis/{group_version}", "the server is currently unable to handle the request")
        return cluster[group_version]["resources"]

    def list_objects(resource):
        if resource.name in failing:
            raise K8sClientError(resource.api_path, "connection refused")
        objects = cluster[resource.group_version]["objects"].get(resource.name, [])
        return copy.deepcopy(objects)

    client.get_api_resources.side_effect = get_api_resources
    client.list_objects.side_effect = list_objects
    return client


@pytest.fixture
def two_group_cluster():
    """Two groups with one listable kind each: one cluster-scoped, one namespaced."""
    return {
        "v1": {
            "resources": [make_resource("namespaces", kind="Namespace", namespaced=False)],
            "objects": {"namespaces": [make_object("team-a")]},
        },
        "apps/v1": {
            "resources": [make_resource("deployments", group="apps", kind="Deployment")],
            "objects": {"deployments": [make_object("web", namespace="team-a", spec={"replicas": 2})]},
        },
    }


@pytest.fixture
def sample_deployment():
    """Namespaced Deployment as returned by the API server."""
    return {
        "apiVersion": "apps/v1",
        "kind": "Deployment",
        "metadata": {
            "name": "web",
            "namespace": "team-a",
            "uid": "1b7d",
            "generation": 4,
            "resourceVersion": "998",
            "selfLink": "/apis/apps/v1/namespaces/team-a/deployments/web",
            "creationTimestamp": "2024-01-01T12:00:00Z",
            "finalizers": ["foregroundDeletion"],
            "ownerReferences": [{"kind": "Thing", "name": "owner"}],
            "managedFields": [{"manager": "kube-controller-manager"}],
            "labels": {"app": "web"},
            "annotations": {
                "deployment.kubernetes.io/revision": "3",
                "kubectl.kubernetes.io/last-applied-configuration": "{}",
                "team": "platform",
            },
            "progressDeadlineSeconds": 600,
        },
        "spec": {
            "replicas": 2,
            "volumeName": "pv-1",
            "volumeMode": "Filesystem",
            "template": {"spec": {"containers": [{"name": "web", "image": "nginx:1.25"}]}},
        },
        "status": {"availableReplicas": 2},
    }
