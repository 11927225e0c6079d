"""Graphviz DOT renderer."""

import logging

from .formatting import GraphFormattingOptions, Header
from .framework import GraphGenerator, GraphRenderer
from .generator import Generator
from .models import EdgeDeclaration, GraphEvent, NodeDeclaration, ProjectLike

logger = logging.getLogger(__name__)

INDENT = "  "


class DotRenderer(GraphRenderer):
    """Writes the event stream verbatim as a DOT digraph.

    Node declarations and edges appear in emission order; nothing is
    grouped or deduplicated.
    """

    @property
    def format_name(self) -> str:
        return "dot"

    def get_file_extension(self) -> str:
        return ".dot"

    def render(self, events: list[GraphEvent], generator: Generator) -> str:
        lines = ["digraph G {"]

        if generator.header is not None:
            lines.append(INDENT + self._render_header(generator.header))

        for event in events:
            if isinstance(event, NodeDeclaration):
                lines.append(INDENT + self._render_node(event))
            elif isinstance(event, EdgeDeclaration):
                lines.append(INDENT + self._render_edge(event))
            else:
                raise TypeError(f"Unknown graph event: {event!r}")

        lines.append("}")
        return "\n".join(lines) + "\n"

    def _render_header(self, header: Header) -> str:
        return (
            f'label="{self._escape(header.text)}" fontsize="{header.font_size}" height="{header.height}" '
            f'labelloc="{header.label_location}" labeljust="{header.label_justification}";'
        )

    def _render_node(self, node: NodeDeclaration) -> str:
        attributes = [f'label="{self._escape(node.label)}"']
        attributes.extend(self._render_formatting(node.formatting))
        return f"{node.identifier} [{', '.join(attributes)}];"

    def _render_formatting(self, formatting: GraphFormattingOptions) -> list[str]:
        attributes = []
        if formatting.shape is not None:
            attributes.append(f'shape="{formatting.shape.value}"')
        if formatting.style is not None:
            attributes.append(f'style="{formatting.style.value}"')
        if formatting.color is not None:
            attributes.append(f'color="{formatting.color}"')
        return attributes

    def _render_edge(self, edge: EdgeDeclaration) -> str:
        return f"{edge.parent} -> {edge.child};"

    def _escape(self, text: str) -> str:
        """Escape text for use inside a quoted DOT string."""
        return text.replace("\\", "\\\\").replace('"', '\\"')


class DotGenerator(GraphGenerator):
    """Generates DOT content for projects under one generator."""

    def __init__(self, projects: list[ProjectLike] | ProjectLike, generator: Generator = Generator.ALL):
        super().__init__(projects, generator)
        self.add_renderer(DotRenderer())

    def generate_content(self) -> str:
        return self.render_graph("dot")
