def test_generate_maze_json(client):
    resp = client.get("/api/maze?width=12&height=7&algorithm=prim&seed=55")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["seed"] == 55 and data["algorithm"] == "prim"
    assert data["width"] == 12 and data["height"] == 7
    assert len(data["cells"]) == 7 and len(data["cells"][0]) == 12
    assert set(data["cells"][0][0]) == {"top", "right", "bottom", "left"}
    assert data["metrics"]["passages"] == 83


def test_same_seed_same_payload(client):
    a = client.get("/api/maze?width=10&height=10&algorithm=eller&seed=9").get_json()
    b = client.get("/api/maze?width=10&height=10&algorithm=eller&seed=9").get_json()
    assert a["cells"] == b["cells"]


def test_defaults_use_configured_size(client):
    data = client.get("/api/maze").get_json()
    assert (data["width"], data["height"]) == (25, 25)
    assert data["algorithm"] == "recursive-backtracking"
    assert isinstance(data["seed"], int)
    small = client.get("/api/maze?size=small&seed=1").get_json()
    assert (small["width"], small["height"]) == (15, 15)


def test_string_seed_is_hashed(client):
    a = client.get("/api/maze?width=5&height=5&seed=hello").get_json()
    b = client.get("/api/maze?width=5&height=5&seed=hello").get_json()
    assert a["seed"] == b["seed"]
    assert a["cells"] == b["cells"]


def test_invalid_parameters_return_400(client):
    for query in ("width=1&height=5", "width=abc", "height=100000", "size=huge"):
        resp = client.get(f"/api/maze?{query}")
        assert resp.status_code == 400, query
        assert "error" in resp.get_json()


def test_unknown_algorithm_falls_back(client):
    data = client.get("/api/maze?width=6&height=6&algorithm=nope&seed=2").get_json()
    assert data["algorithm"] == "recursive-backtracking"


def test_solution_endpoint(client):
    data = client.get("/api/maze/solution?width=9&height=6&algorithm=binary-tree&seed=4").get_json()
    assert data["seed"] == 4
    assert data["path"][0] == [0, 0] and data["path"][-1] == [8, 5]
    assert data["length"] == len(data["path"])


def test_check_endpoint(client):
    data = client.get("/api/maze/check?width=11&height=11&algorithm=recursive-division&seed=6").get_json()
    assert data["reachable"] == data["total"] == 121
    assert data["symmetric"] and data["valid"] and data["perfect"]
    assert data["boundaries"] == {"top": True, "right": True, "bottom": True, "left": True}


def test_move_endpoint_walks_solution(client):
    params = {"seed": 31, "width": 8, "height": 8, "algorithm": "prim"}
    path = client.get("/api/maze/solution?seed=31&width=8&height=8&algorithm=prim").get_json()["path"]
    names = {(0, -1): "up", (1, 0): "right", (0, 1): "down", (-1, 0): "left"}
    x, y = 0, 0
    result = None
    for (ax, ay), (bx, by) in zip(path, path[1:]):
        body = dict(params, x=x, y=y, direction=names[(bx - ax, by - ay)])
        result = client.post("/api/maze/move", json=body).get_json()
        assert result["moved"] is True
        x, y = result["x"], result["y"]
    assert (x, y) == (7, 7)
    assert result["won"] is True


def test_move_blocked_by_boundary(client):
    body = {"seed": 3, "width": 5, "height": 5, "x": 0, "y": 0, "direction": "up"}
    data = client.post("/api/maze/move", json=body).get_json()
    assert data == {"x": 0, "y": 0, "moved": False, "won": False}


def test_move_rejects_bad_input(client):
    base = {"seed": 3, "width": 5, "height": 5}
    assert client.post("/api/maze/move", json=dict(base, x=9, y=0, direction="up")).status_code == 400
    assert client.post("/api/maze/move", json=dict(base, x=0, y=0, direction="jump")).status_code == 400
    assert client.post("/api/maze/move", json={"x": 0, "y": 0, "direction": "up"}).status_code == 400
    assert client.post("/api/maze/move", data="not json", content_type="text/plain").status_code == 400
    move = dict(base, x=0, y=0, direction="up")
    for field, value in (("algorithm", 5), ("direction", 5), ("size", 7)):
        body = dict(move, **{field: value})
        if field == "size":
            del body["width"], body["height"]
        resp = client.post("/api/maze/move", json=body)
        assert resp.status_code == 400, field
        assert resp.get_json()["error"] == f"{field} must be a string"


def test_fractional_numbers_rejected(client):
    base = {"seed": 3, "width": 5, "height": 5, "x": 0, "y": 0, "direction": "up"}
    for field in ("width", "x"):
        resp = client.post("/api/maze/move", json=dict(base, **{field: 5.9 if field == "width" else 0.5}))
        assert resp.status_code == 400, field
    ok = client.post("/api/maze/move", json=dict(base, width=5.0))
    assert ok.status_code == 200


def test_negative_seed_same_for_query_and_json(client):
    from_query = client.get("/api/maze?width=6&height=6&seed=-5").get_json()
    from_json = client.post("/api/maze/move", json={"seed": -5, "width": 6, "height": 6, "direction": "up"})
    assert from_json.status_code == 200
    from labyrinth.routes.maze_api import _coerce_seed

    assert from_query["seed"] == _coerce_seed(-5) == _coerce_seed("-5") == _coerce_seed(" +2147483642 ")


def test_algorithms_endpoint(client):
    data = client.get("/api/maze/algorithms").get_json()
    assert data["algorithms"] == ["recursive-backtracking", "binary-tree", "eller", "prim", "recursive-division"]
    assert data["sizes"]["small"] == [15, 15]
    assert data["default"] == "recursive-backtracking"


def test_cache_bypass(client, test_app, monkeypatch):
    from labyrinth.routes import maze_api

    monkeypatch.setitem(test_app.config, "MAZE_DISABLE_CACHE", True)
    a = maze_api.get_cached_maze(5, 6, 6, "prim")
    b = maze_api.get_cached_maze(5, 6, 6, "prim")
    assert a is not b
    monkeypatch.setitem(test_app.config, "MAZE_DISABLE_CACHE", False)
    c = maze_api.get_cached_maze(5, 6, 6, "prim")
    assert maze_api.get_cached_maze(5, 6, 6, "PRIM") is c


def test_cache_is_bounded(client):
    from labyrinth.routes import maze_api

    for seed in range(20):
        maze_api.get_cached_maze(seed, 4, 4, "eller")
    assert len(maze_api._maze_cache) <= maze_api._MAZE_CACHE_MAX
