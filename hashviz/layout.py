"""Force-directed layout of a graph read from a file."""

from __future__ import annotations

import argparse
import math
import re
import sys
import time
from itertools import combinations
from typing import Callable, List, Optional, Sequence, TextIO, Tuple

from hashviz.graph import Edge, Node, SimpleGraph

CIRCLE_RADIUS = 0.4
DEFAULT_K_REPEL = 1e-3
DEFAULT_K_ATTRACT = 1e-3

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INTEGER_LINE = re.compile(r"\s*[+-]?[0-9]+\s*")


def load_graph(path) -> SimpleGraph:
    """Read a node count followed by whitespace-separated edge index pairs.

    Reading stops at the first token that is not an integer; an unpaired
    trailing index is ignored.
    """
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    numbers: List[int] = []
    for token in tokens:
        if not _INTEGER.fullmatch(token):
            break
        numbers.append(int(token))
    if not numbers:
        raise ValueError(f"{path}: missing node count")
    count, *rest = numbers
    if count < 0:
        raise ValueError(f"{path}: node count must not be negative")
    pairs = iter(rest)
    return SimpleGraph(
        nodes=[Node() for _ in range(count)],
        edges=[Edge(start, end) for start, end in zip(pairs, pairs)],
    )


def init_nodes_circle(graph: SimpleGraph) -> None:
    """Place the nodes evenly on a circle around (0.5, 0.5)."""
    count = len(graph.nodes)
    for k, node in enumerate(graph.nodes):
        angle = 2.0 * math.pi * k / count
        node.x = 0.5 + CIRCLE_RADIUS * math.cos(angle)
        node.y = 0.5 + CIRCLE_RADIUS * math.sin(angle)


def compute_forces(
    graph: SimpleGraph,
    k_repel: float = DEFAULT_K_REPEL,
    k_attract: float = DEFAULT_K_ATTRACT,
) -> Tuple[List[float], List[float]]:
    """Displacements of every node: pairwise repulsion plus attraction along edges."""
    count = len(graph.nodes)
    delta_x = [0.0] * count
    delta_y = [0.0] * count

    for (i, first), (j, second) in combinations(enumerate(graph.nodes), 2):
        dx = second.x - first.x
        dy = second.y - first.y
        force = k_repel / (math.sqrt(dx * dx + dy * dy) + 1e-8)
        angle = math.atan2(dy, dx)
        fx = force * math.cos(angle)
        fy = force * math.sin(angle)
        delta_x[i] -= fx
        delta_y[i] -= fy
        delta_x[j] += fx
        delta_y[j] += fy

    for edge in graph.edges:
        i, j = edge.start, edge.end
        first, second = graph.nodes[i], graph.nodes[j]
        dx = second.x - first.x
        dy = second.y - first.y
        force = k_attract * (dx * dx + dy * dy)
        angle = math.atan2(dy, dx)
        fx = force * math.cos(angle)
        fy = force * math.sin(angle)
        delta_x[i] += fx
        delta_y[i] += fy
        delta_x[j] -= fx
        delta_y[j] -= fy

    return delta_x, delta_y


def move_nodes(
    graph: SimpleGraph, delta_x: Sequence[float], delta_y: Sequence[float]
) -> None:
    """Shift every node by its displacement."""
    for node, dx, dy in zip(graph.nodes, delta_x, delta_y, strict=True):
        node.x += dx
        node.y += dy


def run_layout(
    graph: SimpleGraph,
    seconds: int,
    on_update: Optional[Callable[[SimpleGraph], None]] = None,
) -> int:
    """Repeat force steps until ``seconds`` whole seconds have passed.

    ``on_update`` is called once before the first step and after every step.
    Returns the number of steps taken.
    """
    notify = on_update if on_update is not None else (lambda _graph: None)
    notify(graph)
    start = time.monotonic()
    steps = 0
    while int(time.monotonic() - start) < seconds:
        delta_x, delta_y = compute_forces(graph)
        move_nodes(graph, delta_x, delta_y)
        notify(graph)
        steps += 1
    return steps


def prompt_seconds(
    prompt: str,
    reprompt: str,
    input_func: Callable[[str], str] = input,
    error_stream: Optional[TextIO] = None,
) -> int:
    """Ask until a line holding exactly one integer is given.

    Raises EOFError if input ends first.
    """
    err = sys.stderr if error_stream is None else error_stream
    while True:
        try:
            line = input_func(prompt)
        except EOFError:
            raise EOFError("end of input reached while waiting for a line") from None
        if _INTEGER_LINE.fullmatch(line):
            return int(line)
        err.write(reprompt + "\n")


def _welcome() -> None:
    print("Welcome to GraphViz!")
    print("This program uses a force-directed graph layout algorithm")
    print("to render sleek, snazzy pictures of various graphs.")
    print()


def _try_load(path: str) -> Optional[SimpleGraph]:
    try:
        return load_graph(path)
    except (OSError, ValueError):
        print("Not such a file, please try again!")
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load a graph, lay it out for a while and print the final positions."""
    parser = argparse.ArgumentParser(
        prog="hashviz-layout",
        description="Force-directed layout of a graph file.",
    )
    parser.add_argument("graph_file", nargs="?", help="node count then edge pairs")
    parser.add_argument("seconds", nargs="?", type=int, help="how long to run")
    args = parser.parse_args(argv)

    _welcome()
    graph = _try_load(args.graph_file) if args.graph_file is not None else None
    try:
        if graph is None:
            print("Please input Graph-filename: ")
            while graph is None:
                graph = _try_load(input())
        init_nodes_circle(graph)
        seconds = args.seconds
        if seconds is None:
            seconds = prompt_seconds("Please input how long do you want to run?", "Again")
    except EOFError:
        return 1

    run_layout(graph, seconds)
    for node in graph.nodes:
        print(f"{node.x} {node.y}")
    return 0


if __name__ == "__main__":
    sys.exit(main())