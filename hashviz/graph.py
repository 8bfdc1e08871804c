"""Plain graph types and the scaling used to fit a graph into a drawing window."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600
CIRCLE_RADIUS = 7


@dataclass
class Node:
    """A node's position in the plane."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Edge:
    """An edge given by the indices of its endpoints in the node list."""

    start: int
    end: int


@dataclass
class SimpleGraph:
    """Nodes and the edges between them."""

    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)


def scale_to_window(
    graph: SimpleGraph,
    width: int = WINDOW_WIDTH,
    height: int = WINDOW_HEIGHT,
    radius: int = CIRCLE_RADIUS,
) -> List[Node]:
    """Positions of the graph's nodes scaled so every circle fits the window.

    The smallest coordinate maps to ``radius`` and the largest to
    ``size - radius``. A graph with no nodes gives an empty list.
    """
    if not graph.nodes:
        return []
    xs = [node.x for node in graph.nodes]
    ys = [node.y for node in graph.nodes]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)
    # Avoid dividing by zero when all nodes share a coordinate.
    if min_x == max_x:
        max_x += 1
    if min_y == max_y:
        max_y += 1
    diameter = 2 * radius
    return [
        Node(
            (node.x - min_x) * (width - diameter) / (max_x - min_x) + radius,
            (node.y - min_y) * (height - diameter) / (max_y - min_y) + radius,
        )
        for node in graph.nodes
    ]