"""Data models for kube-dump."""

from .export import DumpOptions, DumpResult, ExportFormat, parse_filter_list
from .kubernetes import APIGroup, GroupVersion, K8sObject, ResourceType
from .redaction import DEFAULT_POLICY, RedactionPolicy

__all__ = [
    "DumpOptions",
    "DumpResult",
    "ExportFormat",
    "parse_filter_list",
    "APIGroup",
    "GroupVersion",
    "K8sObject",
    "ResourceType",
    "DEFAULT_POLICY",
    "RedactionPolicy",
]
