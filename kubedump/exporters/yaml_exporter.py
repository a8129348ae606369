"""YAML exporter."""

import yaml

from ..model.kubernetes import K8sObject
from .base import Exporter


class YamlExporter(Exporter):
    """Export objects as YAML files."""

    extension = "yaml"

    def serialize(self, obj: K8sObject) -> str:
        # sorted keys keep dumps of the same object diffable across runs
        return yaml.safe_dump(obj, default_flow_style=False, sort_keys=True, allow_unicode=True)
