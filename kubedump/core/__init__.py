"""Core business logic."""

from .dumper import ClusterDumper
from .filters import skip_item, skip_resource
from .redactor import clean_state, remove_nested_field

__all__ = ["ClusterDumper", "skip_item", "skip_resource", "clean_state", "remove_nested_field"]
