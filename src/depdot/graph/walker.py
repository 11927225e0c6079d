"""Depth-first traversal of project dependency graphs into emission events."""

import logging

from .formatting import resolve_formatting
from .generator import Generator
from .identity import dependency_identifier, dependency_label, project_identifier
from .models import (
    DependencyLike,
    DependencyNode,
    EdgeDeclaration,
    GraphEvent,
    GraphNode,
    NodeDeclaration,
    ProjectLike,
    RootNode,
)

logger = logging.getLogger(__name__)


class GraphWalker:
    """Walks projects and their dependency trees in pre-order.

    A dependency identity has its children expanded at most once per
    ``walk()`` call, which bounds the walk on cyclic graphs. Every
    occurrence reached before that cutoff still gets a node declaration
    and an edge, so diamonds show every incoming path.
    """

    def __init__(self, generator: Generator = Generator.ALL):
        self.generator = generator

    def walk(self, projects: list[ProjectLike]) -> list[GraphEvent]:
        """Produce the ordered event stream for ``projects``.

        Root nodes of all included projects come first, in project order,
        followed by each project's configurations and their dependency
        forests in supplied order.
        """
        generator = self.generator
        included = [project for project in projects if generator.include_project(project)]
        events: list[GraphEvent] = []
        expanded: set[str] = set()

        for project in included:
            events.append(self._declare(RootNode(project)))

        for project in included:
            parent_id = project_identifier(project)
            for configuration in project.configurations:
                if not generator.include_configuration(configuration):
                    logger.debug(f"Skipping configuration {configuration.name} of {project.name}")
                    continue
                for dependency in configuration.dependencies:
                    self._visit(parent_id, dependency, expanded, events)

        logger.debug(f"Walked {len(included)} project(s) into {len(events)} events, {len(expanded)} expanded")
        return events

    def _visit(
        self,
        parent_id: str,
        dependency: DependencyLike,
        expanded: set[str],
        events: list[GraphEvent],
    ) -> None:
        generator = self.generator
        # Children are pushed reversed so they pop in supplied order.
        stack = [(parent_id, dependency)]
        while stack:
            parent_id, current = stack.pop()
            if not generator.include(current):
                continue

            declaration = self._declare(DependencyNode(current))
            events.append(declaration)
            events.append(EdgeDeclaration(parent=parent_id, child=declaration.identifier))

            if declaration.identifier in expanded:
                continue
            if not generator.children(current):
                continue

            expanded.add(declaration.identifier)
            for child in reversed(current.children):
                stack.append((declaration.identifier, child))

    def _declare(self, node: GraphNode) -> NodeDeclaration:
        generator = self.generator
        if isinstance(node, RootNode):
            project = node.project
            return NodeDeclaration(
                identifier=project_identifier(project),
                label=project.name,
                formatting=resolve_formatting(generator.root_defaults, generator.project_formatting(project)),
            )

        dependency = node.dependency
        return NodeDeclaration(
            identifier=dependency_identifier(dependency),
            label=dependency_label(dependency),
            formatting=resolve_formatting(generator.default_formatting, generator.dependency_formatting(dependency)),
        )
