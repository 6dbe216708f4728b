from fastapi.testclient import TestClient

from api_proto.local_api import app

client = TestClient(app)


def test_solve_endpoint(grid1, solution1):
    res = client.post("/api/solve", json={"grid": grid1})
    assert res.status_code == 200
    body = res.json()
    assert body["solution"] == solution1
    assert body["board"][0] == [4, 8, 3, 9, 2, 1, 6, 5, 7]
    assert len(body["display"]) == 11


def test_invalid_grid_is_400():
    res = client.post("/api/solve", json={"grid": "123"})
    assert res.status_code == 400


def test_contradiction_is_422():
    res = client.post("/api/solve", json={"grid": "55" + "." * 79})
    assert res.status_code == 422


def test_random_endpoint():
    res = client.get("/api/random", params={"seed": 3})
    assert res.status_code == 200
    body = res.json()
    assert len(body["puzzle"]) == 81
    assert body["givens"] >= 17
    assert client.get("/api/random", params={"seed": 3}).json() == body


def test_random_endpoint_rejects_bad_count():
    res = client.get("/api/random", params={"min_givens": 0})
    assert res.status_code == 400
