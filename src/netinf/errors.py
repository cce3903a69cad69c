# src/netinf/errors.py

"""
Exceptions raised while building or querying an influence graph.

Construction errors (bad edge lines, wrong vertex count) are fatal: no
graph is returned. Query errors only concern names that were never seen.
"""

from typing import Optional


class GraphFormatError(ValueError):
    """The input file does not describe a valid graph."""


class MalformedEdgeLineError(GraphFormatError):
    """
    An edge line did not split into exactly two whitespace-separated tokens.

    Attributes:
        line_number: 1-based line number in the input (the header is line 1).
        line: the offending line, without its line terminator.
    """

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"Input file misformatted at line {line_number}: {line!r}")


class GraphSizeMismatchError(GraphFormatError):
    """The number of distinct names seen differs from the declared count."""

    def __init__(self, declared: int, observed: int):
        self.declared = declared
        self.observed = observed
        super().__init__(
            f"Header declares {declared} vertices but {observed} distinct names were found"
        )


class VertexNotFoundError(KeyError):
    """A query referenced a vertex name that is not in the graph."""

    def __init__(self, name: str, context: Optional[str] = None):
        self.name = name
        msg = f"Unknown vertex: {name!r}"
        if context:
            msg = f"{msg} ({context})"
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]
