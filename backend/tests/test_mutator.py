from antgraph.config.settings import GraphConfig
from antgraph.graph.graph_mutator import GraphMutator
from antgraph.graph.graph_store import GraphStore


def _mutator(graph: GraphStore) -> GraphMutator:
    return GraphMutator(graph=graph, config=GraphConfig())


def _labels_at(graph: GraphStore):
    return {v.coordinate: v.label for v in graph.vertices()}


def test_deduction_reflects_each_vertex_through_the_other(graph):
    graph.add_vertex(0, 0, "a")
    graph.add_vertex(2, 0, "a")

    assert _mutator(graph).deduce_antinodes()

    assert graph.find_by_coordinate(4, 0).label == "#"
    assert graph.find_by_coordinate(-2, 0) is None
    assert graph.vertex_count() == 3


def test_deduction_skips_points_already_occupied(graph):
    for x in range(3):
        graph.add_vertex(x, 0, "a")

    assert _mutator(graph).deduce_antinodes()

    assert _labels_at(graph) == {
        (0, 0): "a",
        (1, 0): "a",
        (2, 0): "a",
        (3, 0): "#",
        (4, 0): "#",
    }


def test_deduction_needs_matching_labels(graph):
    graph.add_vertex(1, 1, "a")
    graph.add_vertex(2, 2, "b")

    assert not _mutator(graph).deduce_antinodes()
    assert graph.vertex_count() == 2


def test_markers_never_pair(graph):
    graph.add_vertex(1, 1, "#")
    graph.add_vertex(2, 2, "#")

    assert not _mutator(graph).deduce_antinodes()
    assert graph.vertex_count() == 2


def test_deduction_is_a_single_pass(graph):
    graph.add_vertex(1, 1, "a")
    graph.add_vertex(2, 2, "a")
    mutator = _mutator(graph)

    assert mutator.deduce_antinodes()
    assert _labels_at(graph) == {
        (1, 1): "a",
        (2, 2): "a",
        (0, 0): "#",
        (3, 3): "#",
    }

    assert not mutator.deduce_antinodes()
    assert graph.vertex_count() == 4


def test_custom_marker_label(graph):
    graph.add_vertex(0, 0, "a")
    graph.add_vertex(1, 0, "a")

    GraphMutator(graph=graph, config=GraphConfig(marker_label="*")).deduce_antinodes()

    assert graph.find_by_coordinate(2, 0).label == "*"


def test_linking_connects_every_pair_both_ways(graph):
    for x in range(3):
        graph.add_vertex(x, 0, "a")

    assert _mutator(graph).link_same_frequency()
    assert graph.edge_count() == 6

    vertices = graph.vertices()
    for source in vertices:
        for target in vertices:
            if source != target:
                assert graph.has_edge(source, target)


def test_linking_is_idempotent(graph):
    graph.add_vertex(0, 0, "a")
    graph.add_vertex(3, 3, "a")
    mutator = _mutator(graph)

    assert mutator.link_same_frequency()
    assert not mutator.link_same_frequency()
    assert graph.edge_count() == 2


def test_linking_ignores_markers_empty_cells_and_other_labels(graph):
    graph.add_vertex(0, 0, "#")
    graph.add_vertex(1, 0, "#")
    graph.add_vertex(0, 1, ".")
    graph.add_vertex(1, 1, ".")
    graph.add_vertex(0, 2, "a")
    graph.add_vertex(1, 2, "b")

    assert not _mutator(graph).link_same_frequency()
    assert graph.edge_count() == 0


def test_linking_leaves_deduced_markers_isolated(graph):
    graph.add_vertex(0, 0, "a")
    graph.add_vertex(1, 1, "a")
    mutator = _mutator(graph)

    mutator.deduce_antinodes()
    mutator.link_same_frequency()

    marker = graph.find_by_coordinate(2, 2)
    assert marker.label == "#"
    assert graph.neighbors(marker) == []
    assert graph.edge_count() == 2
