"""Stateless redaction policy tables."""

from typing import Tuple

from pydantic import BaseModel

FieldPath = Tuple[str, ...]


class RedactionPolicy(BaseModel):
    """Named set of field paths removed from objects in stateless mode."""

    name: str
    common: Tuple[FieldPath, ...] = ()
    namespaced_only: Tuple[FieldPath, ...] = ()

    class Config:
        frozen = True

    def paths_for(self, namespace: str) -> Tuple[FieldPath, ...]:
        """Paths that apply to an object in the given namespace ("" = cluster-scoped)."""
        if namespace:
            return self.common + self.namespaced_only
        return self.common


# Partially based on the state list of WoozyMasta/kube-dump.
KUBE_DUMP_V1 = RedactionPolicy(
    name="kube-dump/v1",
    common=(
        ("metadata", "annotations", "control-plane.alpha.kubernetes.io/leader"),
        ("metadata", "annotations", "kubectl.kubernetes.io/last-applied-configuration"),
        ("metadata", "creationTimestamp"),
        ("metadata", "finalizers"),
        ("metadata", "generation"),
        ("metadata", "managedFields"),
        ("metadata", "resourceVersion"),
        ("metadata", "selfLink"),
        ("metadata", "ownerReferences"),
        ("metadata", "uid"),
        ("status",),
    ),
    namespaced_only=(
        ("metadata", "annotations", "autoscaling.alpha.kubernetes.io/conditions"),
        ("metadata", "annotations", "autoscaling.alpha.kubernetes.io/current-metrics"),
        ("metadata", "annotations", "deployment.kubernetes.io/revision"),
        ("metadata", "annotations", "kubernetes.io/config.seen"),
        ("metadata", "annotations", "kubernetes.io/service-account.uid"),
        ("metadata", "annotations", "pv.kubernetes.io/bind-completed"),
        ("metadata", "annotations", "pv.kubernetes.io/bound-by-controller"),
        ("metadata", "clusterIP"),
        ("metadata", "progressDeadlineSeconds"),
        ("metadata", "revisionHistoryLimit"),
        ("metadata", "spec", "metadata", "annotations", "kubectl.kubernetes.io/restartedAt"),
        ("metadata", "spec", "metadata", "creationTimestamp"),
        ("spec", "volumeName"),
        ("spec", "volumeMode"),
    ),
)

DEFAULT_POLICY = KUBE_DUMP_V1
