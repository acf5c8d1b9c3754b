def test_stats_endpoint(client):
    response = client.get("/graph/stats")
    assert response.status_code == 200
    body = response.json()
    assert body["vertices"] == 3
    assert body["edges"] == 2
    assert body["markers"] == 1
    assert (body["max_x"], body["max_y"]) == (2, 2)


def test_matrix_endpoint(client):
    body = client.get("/graph/matrix").json()
    assert body["rows"] == ["A..", ".A.", "..#"]
    assert body["matrix"] == "A..\n.A.\n..#\n"


def test_vertices_are_listed_newest_first(client):
    body = client.get("/graph/vertices").json()
    assert [(v["x"], v["y"], v["label"]) for v in body] == [
        (2, 2, "#"),
        (1, 1, "A"),
        (0, 0, "A"),
    ]


def test_export_and_adjacency(client):
    export = client.get("/graph/export").json()
    assert len(export["vertices"]) == 3
    assert {(e["source"], e["target"]) for e in export["edges"]} == {(0, 1), (1, 0)}

    adjacency = client.get("/graph/adjacency").json()
    assert adjacency["count"] == 3
    assert adjacency["lines"][0] == "Antenna (2, 2) [#] ->"


def test_add_vertex_endpoint(client):
    created = client.post("/graph/vertices", json={"x": 4, "y": 0, "label": "b"})
    assert created.status_code == 200
    assert created.json()["inserted"] is True

    duplicate = client.post("/graph/vertices", json={"x": 4, "y": 0, "label": "c"})
    assert duplicate.json()["inserted"] is False
    assert duplicate.json()["vertex"]["label"] == "b"

    invalid = client.post("/graph/vertices", json={"x": 5, "y": 0, "label": "bc"})
    assert invalid.status_code == 422


def test_remove_vertex_endpoint(client):
    assert client.delete("/graph/vertices/1/1").status_code == 200
    assert client.get("/graph/stats").json()["edges"] == 0
    assert client.delete("/graph/vertices/1/1").status_code == 404


def test_edge_endpoints(client):
    payload = {"x_src": 0, "y_src": 0, "x_dst": 2, "y_dst": 2}

    assert client.post("/graph/edges", json=payload).json()["changed"] is True
    assert client.post("/graph/edges", json=payload).json()["changed"] is False
    assert client.request("DELETE", "/graph/edges", json=payload).json()["changed"] is True
    assert client.get("/graph/stats").json()["edges"] == 2


def test_deduce_and_link_endpoints_are_idempotent(client):
    assert client.post("/graph/deduce").json()["changed"] is False
    assert client.post("/graph/link").json()["changed"] is False


def test_traversal_endpoint(client):
    response = client.post(
        "/traversal/",
        json={"strategy": "depth_first", "x": 0, "y": 0},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["strategy"] == "depth_first"
    assert body["start"]["label"] == "A"
    assert body["sequence"] == [0, 1]
    assert [(v["vertex"]["id"], v["order"]) for v in body["visited"]] == [(1, 2), (0, 1)]

    visited = client.get("/traversal/visited").json()
    assert len(visited) == 2


def test_traversal_with_missing_seed(client):
    response = client.post("/traversal/", json={"strategy": "breadth_first", "x": 9, "y": 9})
    assert response.status_code == 404
    assert client.get("/traversal/visited").json() == []


def test_coordinates_outside_32_bits_are_rejected(client):
    vertex = client.post("/graph/vertices", json={"x": 2**31, "y": 0, "label": "b"})
    assert vertex.status_code == 422

    edge = client.post(
        "/graph/edges",
        json={"x_src": 0, "y_src": 0, "x_dst": 0, "y_dst": -(2**31) - 1},
    )
    assert edge.status_code == 422
    assert client.get("/graph/stats").json()["vertices"] == 3


def test_matrix_too_large_to_render(client):
    created = client.post(
        "/graph/vertices",
        json={"x": 2**31 - 1, "y": 2**31 - 1, "label": "b"},
    )
    assert created.status_code == 200

    response = client.get("/graph/matrix")
    assert response.status_code == 413
