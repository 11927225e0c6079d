"""Dependency graph generation for depdot.

Walks projects and their resolved dependency trees and renders them as
Graphviz DOT documents.
"""

from .dot import DotGenerator, DotRenderer
from .formatting import MAX_COLOR_VALUE, Color, GraphFormattingOptions, Header, Shape, Style
from .framework import GraphGenerator, GraphRenderer
from .generator import Generator
from .identity import display_name, dot_identifier, project_identifier
from .models import (
    DependencyNode,
    EdgeDeclaration,
    NodeDeclaration,
    Project,
    ProjectConfiguration,
    ResolvedDependency,
    RootNode,
)
from .walker import GraphWalker

__all__ = [
    "Color",
    "DependencyNode",
    "DotGenerator",
    "DotRenderer",
    "EdgeDeclaration",
    "Generator",
    "GraphFormattingOptions",
    "GraphGenerator",
    "GraphRenderer",
    "GraphWalker",
    "Header",
    "MAX_COLOR_VALUE",
    "NodeDeclaration",
    "Project",
    "ProjectConfiguration",
    "ResolvedDependency",
    "RootNode",
    "Shape",
    "Style",
    "display_name",
    "dot_identifier",
    "project_identifier",
]
