import pytest

from hashviz.graph import (
    CIRCLE_RADIUS,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Edge,
    Node,
    SimpleGraph,
    scale_to_window,
)


def test_empty_graph_scales_to_nothing():
    assert scale_to_window(SimpleGraph()) == []


def test_extremes_map_to_window_borders():
    graph = SimpleGraph(nodes=[Node(-3.0, 2.0), Node(5.0, 10.0), Node(1.0, 6.0)])
    scaled = scale_to_window(graph, 100, 50, 5)
    assert scaled[0].x == pytest.approx(5)
    assert scaled[0].y == pytest.approx(5)
    assert scaled[1].x == pytest.approx(100 - 5)
    assert scaled[1].y == pytest.approx(50 - 5)


def test_middle_node_stays_proportional():
    graph = SimpleGraph(nodes=[Node(0.0, 0.0), Node(4.0, 4.0), Node(2.0, 1.0)])
    scaled = scale_to_window(graph, 100, 100, 10)
    lo, hi = scaled[0].x, scaled[1].x
    assert scaled[2].x == pytest.approx((lo + hi) / 2)
    assert lo < scaled[2].y < hi


def test_single_node_goes_to_corner():
    scaled = scale_to_window(SimpleGraph(nodes=[Node(0.3, 0.7)]))
    assert scaled == [Node(CIRCLE_RADIUS, CIRCLE_RADIUS)]


def test_default_window_bounds_all_nodes():
    graph = SimpleGraph(nodes=[Node(i * 0.1, (i * 7) % 5) for i in range(10)])
    for node in scale_to_window(graph):
        assert CIRCLE_RADIUS <= node.x <= WINDOW_WIDTH - CIRCLE_RADIUS + 1e-9
        assert CIRCLE_RADIUS <= node.y <= WINDOW_HEIGHT - CIRCLE_RADIUS + 1e-9


def test_scaling_leaves_graph_untouched():
    graph = SimpleGraph(nodes=[Node(1.0, 2.0), Node(3.0, 4.0)], edges=[Edge(0, 1)])
    scale_to_window(graph)
    assert graph.nodes == [Node(1.0, 2.0), Node(3.0, 4.0)]
    assert graph.edges == [Edge(0, 1)]


def test_edge_is_immutable():
    edge = Edge(0, 1)
    with pytest.raises(AttributeError):
        edge.start = 2
    assert edge.start == 0
    assert edge.end == 1
    assert edge == Edge(0, 1)