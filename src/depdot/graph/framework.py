"""Graph generation framework: walker plus pluggable renderers."""

import logging
from abc import ABC, abstractmethod

from .generator import Generator
from .models import GraphEvent, ProjectLike
from .walker import GraphWalker

logger = logging.getLogger(__name__)


class GraphRenderer(ABC):
    """Abstract base class for graph renderers."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Name of the output format."""
        pass

    @abstractmethod
    def render(self, events: list[GraphEvent], generator: Generator) -> str:
        """Render an emission event stream to string format."""
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get file extension for this format."""
        pass


class GraphGenerator:
    """Runs one generator over a set of projects and renders the result."""

    def __init__(self, projects: list[ProjectLike] | ProjectLike, generator: Generator = Generator.ALL):
        if isinstance(projects, (list, tuple)):
            self.projects = list(projects)
        else:
            self.projects = [projects]
        self.generator = generator
        self.renderers: dict[str, GraphRenderer] = {}

    def add_renderer(self, renderer: GraphRenderer) -> None:
        """Add a graph renderer."""
        self.renderers[renderer.format_name] = renderer

    def walk(self) -> list[GraphEvent]:
        return GraphWalker(self.generator).walk(self.projects)

    def render_graph(self, format_name: str = "dot") -> str:
        """Walk the projects and render them.

        Args:
            format_name: Output format registered via ``add_renderer``

        Returns:
            Rendered graph as string
        """
        if format_name not in self.renderers:
            available = list(self.renderers.keys())
            raise ValueError(f"Unknown format '{format_name}'. Available: {available}")

        renderer = self.renderers[format_name]
        generator_label = self.generator.name or "default"
        logger.info(f"Rendering {generator_label} graph for {len(self.projects)} project(s) with {renderer.format_name} renderer")
        return renderer.render(self.walk(), self.generator)
