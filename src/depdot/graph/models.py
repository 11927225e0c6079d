"""Graph data models for dependency graph generation."""

from dataclasses import dataclass, field
from typing import Protocol, Sequence, Union

from .formatting import GraphFormattingOptions


class DependencyLike(Protocol):
    """Read-only view of a resolved dependency supplied by the build collaborator."""

    @property
    def group(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def version(self) -> str: ...

    @property
    def label(self) -> str: ...

    @property
    def children(self) -> Sequence["DependencyLike"]: ...


class ConfigurationLike(Protocol):
    """A named dependency scope holding an ordered forest of root dependencies."""

    @property
    def name(self) -> str: ...

    @property
    def dependencies(self) -> Sequence[DependencyLike]: ...


class ProjectLike(Protocol):
    """A root project with its ordered configurations."""

    @property
    def name(self) -> str: ...

    @property
    def group(self) -> str | None: ...

    @property
    def configurations(self) -> Sequence[ConfigurationLike]: ...


@dataclass(eq=False)
class ResolvedDependency:
    """A module in the resolved dependency graph.

    Children may point back at ancestors, so equality is identity-based
    and ``repr`` does not descend into children.
    """
    group: str
    name: str
    version: str = ""
    label: str = ""
    children: list["ResolvedDependency"] = field(default_factory=list)

    @property
    def coordinate(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"

    def __repr__(self) -> str:
        return f"ResolvedDependency({self.coordinate!r}, children={len(self.children)})"


@dataclass
class ProjectConfiguration:
    """Named dependency scope of a project."""
    name: str
    dependencies: list[ResolvedDependency] = field(default_factory=list)


@dataclass
class Project:
    """Root entity of a generated graph."""
    name: str
    group: str | None = None
    configurations: list[ProjectConfiguration] = field(default_factory=list)


@dataclass(frozen=True, eq=False)
class RootNode:
    """Graph node for a project."""
    project: ProjectLike


@dataclass(frozen=True, eq=False)
class DependencyNode:
    """Graph node for one occurrence of a dependency."""
    dependency: DependencyLike


GraphNode = Union[RootNode, DependencyNode]


@dataclass(frozen=True)
class NodeDeclaration:
    """Emission event declaring a node occurrence."""
    identifier: str
    label: str
    formatting: GraphFormattingOptions


@dataclass(frozen=True)
class EdgeDeclaration:
    """Emission event for a directed edge between two identities."""
    parent: str
    child: str


GraphEvent = Union[NodeDeclaration, EdgeDeclaration]
