"""Resolved dependency graph document parser implementation."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from depdot.graph.models import Project, ProjectConfiguration, ResolvedDependency
from depdot.models.graph_document import GraphDocument, split_coordinate

logger = logging.getLogger(__name__)


class GraphDocumentParser:
    """Parser for resolved dependency graph JSON documents."""

    @staticmethod
    def parse_file(document_file: Path) -> list[Project]:
        """Parse a graph document file into linked projects.

        Args:
            document_file: Path to the JSON document

        Returns:
            Projects in document order

        Raises:
            FileNotFoundError: If the document doesn't exist
            ValueError: If the document is invalid JSON or structurally invalid
        """
        if not document_file.exists():
            raise FileNotFoundError(f"Graph document not found: {document_file}")

        try:
            with open(document_file, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in graph document {document_file}: {e}")

        logger.debug(f"Loaded graph document {document_file}")
        return GraphDocumentParser.parse_data(data)

    @staticmethod
    def parse_data(data: dict[str, Any]) -> list[Project]:
        try:
            document = GraphDocument(**data)
        except ValidationError as e:
            raise ValueError(f"Invalid graph document structure: {e}")
        return GraphDocumentParser.link(document)

    @staticmethod
    def link(document: GraphDocument) -> list[Project]:
        """Link module entries into a shared, possibly cyclic, dependency graph.

        Each coordinate maps to exactly one ``ResolvedDependency`` instance,
        so every reference to it shares the same children.
        """
        modules = {
            module.coordinate: ResolvedDependency(
                group=module.group,
                name=module.name,
                version=module.version,
                label=module.label or "",
            )
            for module in document.modules
        }

        versions: dict[tuple[str, str], list[str]] = {}
        for module in document.modules:
            versions.setdefault((module.group, module.name), []).append(module.coordinate)

        def resolve(coordinate: str, referenced_by: str) -> ResolvedDependency:
            group, name, version = split_coordinate(coordinate)
            if version:
                key = f"{group}:{name}:{version}"
                candidates = [key] if key in modules else []
            else:
                # group:name matches the module whatever its version
                candidates = versions.get((group, name), [])
            if not candidates:
                raise ValueError(f"Unknown module {coordinate!r} referenced by {referenced_by}")
            if len(candidates) > 1:
                raise ValueError(
                    f"Ambiguous module {coordinate!r} referenced by {referenced_by}: "
                    f"matches {', '.join(candidates)}"
                )
            return modules[candidates[0]]

        for module in document.modules:
            dependency = modules[module.coordinate]
            dependency.children = [resolve(child, module.coordinate) for child in module.dependencies]

        projects = []
        for entry in document.projects:
            configurations = [
                ProjectConfiguration(
                    name=configuration.name,
                    dependencies=[
                        resolve(coordinate, f"{entry.name}/{configuration.name}")
                        for coordinate in configuration.dependencies
                    ],
                )
                for configuration in entry.configurations
            ]
            projects.append(Project(name=entry.name, group=entry.group, configurations=configurations))

        logger.info(f"Linked {len(projects)} project(s) over {len(modules)} module(s)")
        return projects
