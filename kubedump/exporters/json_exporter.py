"""JSON exporter."""

import json

from ..model.kubernetes import K8sObject
from .base import Exporter


class JsonExporter(Exporter):
    """Export objects as JSON files."""

    extension = "json"

    def serialize(self, obj: K8sObject) -> str:
        return json.dumps(obj, indent=2, sort_keys=True) + "\n"
