"""Classic algorithms: coding, string matching, graphs, geometry and optimisation."""

__version__ = "0.1.0"

__all__ = [
    "assignment",
    "cli",
    "divide_conquer",
    "dynamic",
    "flow",
    "geometry",
    "huffman",
    "knapsack",
    "queens",
    "scheduling",
    "shortest_paths",
    "string_match",
]