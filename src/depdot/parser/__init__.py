"""Input document parsers for depdot."""

from depdot.parser.graph_document import GraphDocumentParser

__all__ = ["GraphDocumentParser"]
