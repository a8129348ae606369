"""Resource exporters."""

from pathlib import Path

from ..model.export import ExportFormat
from .base import Exporter, ExportError
from .yaml_exporter import YamlExporter
from .json_exporter import JsonExporter

EXPORTERS = {
    ExportFormat.YAML: YamlExporter,
    ExportFormat.JSON: JsonExporter,
}


def get_exporter(export_format: ExportFormat, output_dir: Path) -> Exporter:
    """Create the exporter for a format, YAML if unknown."""
    exporter_cls = EXPORTERS.get(export_format, YamlExporter)
    return exporter_cls(output_dir)


__all__ = ["Exporter", "ExportError", "YamlExporter", "JsonExporter", "EXPORTERS", "get_exporter"]
