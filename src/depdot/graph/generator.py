"""Generator definitions: the filter chain and formatting policy of one graph."""

import dataclasses
from dataclasses import dataclass
from typing import Callable, ClassVar

from .formatting import GraphFormattingOptions, Header, Shape
from .models import ConfigurationLike, DependencyLike, ProjectLike

DependencyPredicate = Callable[[DependencyLike], bool]
DependencyFormatter = Callable[[DependencyLike], GraphFormattingOptions | None]
ProjectFormatter = Callable[[ProjectLike], GraphFormattingOptions | None]


def _accept(_item) -> bool:
    return True


def _no_override(_item) -> None:
    return None


def is_test_configuration(configuration: ConfigurationLike) -> bool:
    return "test" in configuration.name.lower()


def _exclude_test_configurations(configuration: ConfigurationLike) -> bool:
    return not is_test_configuration(configuration)


@dataclass(frozen=True)
class Generator:
    """Inclusion and formatting policy for one generated graph.

    All callables must be pure; an exception raised by one aborts
    generation.

    Attributes:
        name: Generator name, used to derive the output file name.
        include: Whether a dependency (and its whole subtree) is emitted.
        children: Whether the children of an emitted dependency are walked.
        include_project: Whether a project and its subtree are emitted.
        include_configuration: Whether a configuration is walked. Excludes
            test configurations by default.
        dependency_formatting: Per-dependency override of the dependency defaults.
        project_formatting: Per-project override of the root defaults.
        root_formatting: Defaults for project root nodes.
        default_formatting: Defaults for dependency nodes, and the fallback
            for root nodes.
        header: Optional graph header.
    """
    name: str = ""
    include: DependencyPredicate = _accept
    children: DependencyPredicate = _accept
    include_project: Callable[[ProjectLike], bool] = _accept
    include_configuration: Callable[[ConfigurationLike], bool] = _exclude_test_configurations
    dependency_formatting: DependencyFormatter = _no_override
    project_formatting: ProjectFormatter = _no_override
    root_formatting: GraphFormattingOptions = GraphFormattingOptions()
    default_formatting: GraphFormattingOptions = GraphFormattingOptions(shape=Shape.BOX)
    header: Header | None = None

    ALL: ClassVar["Generator"]

    def copy(self, **changes) -> "Generator":
        return dataclasses.replace(self, **changes)

    @property
    def output_file_name(self) -> str:
        suffix = f"-{self.name}" if self.name else ""
        return f"dependency-graph{suffix}.dot"

    @property
    def root_defaults(self) -> GraphFormattingOptions:
        return self.root_formatting.merge(self.default_formatting)


Generator.ALL = Generator()
