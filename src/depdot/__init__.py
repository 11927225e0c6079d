"""depdot - Dependency graph to Graphviz DOT generator.

depdot walks projects and their resolved dependency trees, applies a
configurable inclusion and formatting policy, and writes deterministic DOT
documents for Graphviz.
"""

__version__ = "0.1.0"
__description__ = "Dependency graph to Graphviz DOT generator"

from depdot.config import DepdotConfig
from depdot.graph import DotGenerator, Generator

__all__ = [
    "__version__",
    "__description__",
    "DepdotConfig",
    "DotGenerator",
    "Generator",
]
