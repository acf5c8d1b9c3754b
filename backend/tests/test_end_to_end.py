from pathlib import Path

from antgraph.config.settings import AntgraphConfig
from antgraph.formats.edges_binary import write_edges
from antgraph.formats.grid import render_matrix, save_vertices
from antgraph.graph.graph_store import GraphStore

from backend.app.loaders.graph_loader import load_graph_from_files
from backend.app.services.antenna_service import AntennaService


def test_grid_to_traversal_pipeline(tmp_path: Path):
    """
    End-to-end run covering:
    - grid loading
    - frequency linking
    - antinode deduction
    - matrix rendering
    - traversal and flat-file output
    """

    grid_path = tmp_path / "antennas.txt"
    grid_path.write_text("A.\n.A\n", encoding="utf-8")

    graph = GraphStore()
    assert load_graph_from_files(graph=graph, grid_path=grid_path)

    # ---------------- Loading ----------------

    assert graph.find_by_coordinate(0, 0).label == "A"
    assert graph.find_by_coordinate(1, 1).label == "A"
    assert graph.vertex_count() == 2

    service = AntennaService(graph=graph, config=AntgraphConfig())

    # ---------------- Linking ----------------

    assert service.link_same_frequency()
    assert graph.edge_count() == 2

    # ---------------- Deduction ----------------

    assert service.deduce_antinodes()
    assert graph.find_by_coordinate(2, 2).label == "#"
    assert graph.find_by_coordinate(-1, -1) is None
    assert graph.vertex_count() == 3

    assert render_matrix(graph) == "A..\n.A.\n..#\n"

    # ---------------- Traversal ----------------

    result = service.traverse(strategy="breadth_first", x=0, y=0)
    assert [graph.find_by_id(i).coordinate for i in result.sequence()] == [(0, 0), (1, 1)]
    assert service.query.visit_order(2, 2) == 0

    # ---------------- Output ----------------

    edges_path = tmp_path / "edges.bin"
    result_path = tmp_path / "result.txt"
    assert write_edges(graph, edges_path)
    assert save_vertices(graph, result_path)

    assert edges_path.stat().st_size == 16
    assert result_path.read_text(encoding="utf-8") == "2 2 #\n1 1 A\n0 0 A\n"


def test_grow_restores_saved_edges_between_deduction_and_linking(tmp_path: Path):
    grid_path = tmp_path / "antennas.txt"
    grid_path.write_text("a.a\n", encoding="utf-8")

    # the saved edge ends on the antinode at (4, 0), which only exists
    # once deduction has run
    source = GraphStore()
    load_graph_from_files(graph=source, grid_path=grid_path)
    source.add_vertex(4, 0, "#")
    source.add_edge(0, 0, 4, 0)
    edges_path = tmp_path / "edges.bin"
    assert write_edges(source, edges_path)

    restored = GraphStore()
    assert load_graph_from_files(graph=restored, grid_path=grid_path)
    service = AntennaService(graph=restored, config=AntgraphConfig())

    assert service.grow(edges_path=edges_path) == {
        "antinodes": True,
        "restored": True,
        "links": True,
    }

    a = restored.find_by_coordinate(0, 0)
    marker = restored.find_by_coordinate(4, 0)
    assert marker.label == "#"
    assert restored.has_edge(a, marker)
    assert restored.has_edge(marker, a)
    # restored edge first, frequency link on top of it
    assert [n.coordinate for n in restored.neighbors(a)] == [(2, 0), (4, 0)]


def test_loader_fails_without_grid(tmp_path: Path):
    graph = GraphStore()
    assert not load_graph_from_files(graph=graph, grid_path=tmp_path / "nope.txt")
    assert graph.vertex_count() == 0


def test_service_grow_honours_config():
    graph = GraphStore()
    graph.add_vertex(0, 0, "a")
    graph.add_vertex(1, 0, "a")
    service = AntennaService(graph=graph, config=AntgraphConfig())

    assert service.grow() == {"antinodes": True, "restored": False, "links": True}
    assert service.stats()["markers"] == 1
    assert service.stats()["edges"] == 2
