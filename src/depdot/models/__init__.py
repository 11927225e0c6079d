"""Pydantic data models for depdot input documents."""

from depdot.models.graph_document import (
    ConfigurationEntry,
    GraphDocument,
    ModuleEntry,
    ProjectEntry,
    split_coordinate,
)

__all__ = [
    "GraphDocument",
    "ProjectEntry",
    "ConfigurationEntry",
    "ModuleEntry",
    "split_coordinate",
]
