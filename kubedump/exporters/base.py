"""Base exporter class."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..model.kubernetes import K8sObject, object_name, object_namespace

CLUSTER_SCOPED_DIR = "clusterscoped"
NAMESPACED_DIR = "namespaced"


class ExportError(Exception):
    """An object could not be serialized or written."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason} ({path})")


class Exporter(ABC):
    """Writes one file per object below output_dir.

    Layout: <output_dir>/{clusterscoped|namespaced/<namespace>}/<resource>[.<group>]/<name>.<ext>
    """

    extension: str = ""

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

    @abstractmethod
    def serialize(self, obj: K8sObject) -> str:
        """Render an object as text."""
        pass

    def object_dir(self, resource_and_group: str, obj: K8sObject) -> Path:
        namespace = object_namespace(obj)
        if namespace:
            return self.output_dir / NAMESPACED_DIR / namespace / resource_and_group
        return self.output_dir / CLUSTER_SCOPED_DIR / resource_and_group

    def object_path(self, resource_and_group: str, obj: K8sObject) -> Path:
        """Target file of an object; ":" is not allowed in Windows filenames."""
        filename = object_name(obj).replace(":", "_") + f".{self.extension}"
        return self.object_dir(resource_and_group, obj) / filename

    def write(self, resource_and_group: str, obj: K8sObject) -> Path:
        """Serialize obj and write it, replacing any existing file."""
        path = self.object_path(resource_and_group, obj)

        try:
            content = self.serialize(obj)
        except Exception as e:
            raise ExportError(path, f"failed marshalling: {e}") from e

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ExportError(path.parent, f"failed creating dir: {e}") from e

        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ExportError(path, f"failed writing file: {e}") from e

        return path
