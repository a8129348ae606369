"""Kubernetes client wrapper."""

import subprocess
import json
from typing import List, Tuple, Optional, Dict, Any

from ..model.kubernetes import APIGroup, GroupVersion, K8sObject, ResourceType
from ..utils.logger import get_logger

logger = get_logger(__name__)


class K8sClientError(Exception):
    """A kubectl call failed or returned output that is not JSON."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"kubectl get --raw {path}: {reason}")


class K8sClient:
    """Wrapper for kubectl commands."""

    def __init__(self, kubeconfig: Optional[str] = None, context: Optional[str] = None):
        self.kubeconfig = kubeconfig
        self.context = context
        self._verify_kubectl()

    def _verify_kubectl(self):
        """Verify kubectl is available and configured."""
        try:
            subprocess.run(
                ["kubectl", "version", "--client", "-o", "json"],
                capture_output=True,
                text=True,
                check=True,
            )
            logger.debug("kubectl verified successfully")
        except FileNotFoundError:
            raise RuntimeError("kubectl command not found. Please install kubectl.")
        except subprocess.CalledProcessError:
            logger.warning("kubectl verification failed")

    def _build_command(self, args: List[str]) -> List[str]:
        """Build kubectl command with kubeconfig and context."""
        cmd = ["kubectl"]

        if self.kubeconfig:
            cmd.extend(["--kubeconfig", self.kubeconfig])

        if self.context:
            cmd.extend(["--context", self.context])

        cmd.extend(args)
        return cmd

    def execute(self, args: List[str]) -> Tuple[bool, str]:
        """Execute kubectl command and return success status and output."""
        cmd = self._build_command(args)
        logger.debug(f"Executing: {' '.join(cmd)}")

        try:
            # API responses are UTF-8 JSON regardless of the host locale
            result = subprocess.run(
                cmd, capture_output=True, text=True, encoding="utf-8", check=True
            )
            return True, result.stdout
        except subprocess.CalledProcessError as e:
            return False, (e.stderr or "").strip() or f"exit status {e.returncode}"

    def get_raw(self, path: str) -> Dict[str, Any]:
        """GET an API path and decode the JSON body."""
        success, output = self.execute(["get", "--raw", path])
        if not success:
            raise K8sClientError(path, output)
        try:
            return json.loads(output)
        except json.JSONDecodeError as e:
            raise K8sClientError(path, f"invalid JSON response: {e}")

    def get_server_groups(self) -> List[APIGroup]:
        """Discover API groups, the legacy core group first."""
        core = self.get_raw("/api")
        groups = [
            APIGroup(
                name="",
                versions=[GroupVersion(group_version=v, version=v) for v in core.get("versions", [])],
            )
        ]

        named = self.get_raw("/apis")
        for group in named.get("groups", []):
            groups.append(APIGroup.model_validate(group))

        return groups

    def get_api_resources(self, group_version: str) -> List[ResourceType]:
        """Get resource types served under a group version such as "apps/v1" or "v1"."""
        if "/" in group_version:
            group, version = group_version.split("/", 1)
            path = f"/apis/{group_version}"
        else:
            group, version = "", group_version
            path = f"/api/{group_version}"

        data = self.get_raw(path)

        resources = []
        for resource in data.get("resources", []):
            resources.append(
                ResourceType(
                    name=resource.get("name", ""),
                    kind=resource.get("kind", ""),
                    namespaced=resource.get("namespaced", False),
                    verbs=resource.get("verbs") or [],
                    api_group=group,
                    version=version,
                )
            )
        return resources

    def list_objects(self, resource: ResourceType) -> List[K8sObject]:
        """List all objects of a resource type across all namespaces."""
        data = self.get_raw(resource.api_path)

        api_version = data.get("apiVersion", resource.group_version)
        list_kind = data.get("kind", "")
        item_kind = list_kind[: -len("List")] if list_kind.endswith("List") else resource.kind

        items = data.get("items") or []
        for item in items:
            # Typed lists omit apiVersion/kind on their items.
            item.setdefault("apiVersion", api_version)
            item.setdefault("kind", item_kind)

        return items
