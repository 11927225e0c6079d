"""Canonical node identities and default display names."""

from .models import DependencyLike, ProjectLike

# Coordinate separators dropped from identifiers.
_SEPARATORS = frozenset(".-:")

# Words DOT reserves, compared after lowercasing.
_DOT_KEYWORDS = frozenset({"graph", "digraph", "subgraph", "node", "edge", "strict"})

# Encoded results starting with "_" start with "__" or "_x", never "_k".
_RESERVED_PREFIX = "_k"


def dot_identifier(group: str, name: str) -> str:
    """Map a ``(group, name)`` coordinate to a DOT node identifier.

    The version never takes part, so every version of a module collapses
    onto one node. Separators are removed and letters lowercased; ``_`` is
    doubled and any other non-alphanumeric character is written as
    ``_xHHHH_``. A result that is empty, starts with a digit or is a DOT
    keyword gets a ``_k`` prefix, so it is always a bare DOT identifier
    usable as a node key.
    """
    parts = []
    for char in f"{group}{name}":
        if char in _SEPARATORS:
            continue
        if char.isascii() and char.isalnum():
            parts.append(char.lower())
        elif char == "_":
            parts.append("__")
        else:
            parts.append(f"_x{ord(char):04x}_")
    identifier = "".join(parts)
    if not identifier or identifier[0].isdigit() or identifier in _DOT_KEYWORDS:
        return _RESERVED_PREFIX + identifier
    return identifier


def dependency_identifier(dependency: DependencyLike) -> str:
    return dot_identifier(dependency.group, dependency.name)


def project_identifier(project: ProjectLike) -> str:
    """Identifier of a project root node, qualified by its group if it has one."""
    return dot_identifier(project.group or "", project.name)


def display_name(group: str, name: str) -> str:
    """Default label for a module that carries no explicit label."""
    if group.startswith("android.arch."):
        return group.removeprefix("android.arch.").replace(".", "-") + "-" + name
    if group == "com.squareup.sqldelight":
        return f"sqldelight-{name}"
    if group == "org.jetbrains" and name == "annotations":
        return "jetbrains-annotations"
    return name


def dependency_label(dependency: DependencyLike) -> str:
    return dependency.label or display_name(dependency.group, dependency.name)
