"""Classic algorithms: backtracking, graphs, hashing, number theory, geometry, spiral matrices, searching and sorting."""

__version__ = "0.1.0"