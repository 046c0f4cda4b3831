"""
Tests for the HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from pymatrix import __version__
from pymatrix.server import app


@pytest.fixture
def client():
    return TestClient(app)


class TestEndpoints:

    def test_add(self, client, square_pair):
        A, B = square_pair
        resp = client.post("/api/matrix/add", json={"A": A, "B": B})
        assert resp.status_code == 200
        assert resp.json() == {"result": [[6.0, 8.0], [10.0, 12.0]], "error": None}

    def test_subtract(self, client):
        resp = client.post("/api/matrix/subtract", json={"A": [[1]], "B": [[3]]})
        assert resp.json()["result"] == [[-2.0]]

    def test_multiply(self, client, square_pair):
        A, B = square_pair
        resp = client.post("/api/matrix/multiply", json={"A": A, "B": B})
        assert resp.json()["result"] == [[19.0, 22.0], [43.0, 50.0]]

    def test_rref(self, client):
        resp = client.post("/api/matrix/rref", json={"A": [[1, 2, 3], [4, 5, 6]]})
        assert resp.status_code == 200
        assert resp.json()["result"] == [[1.0, 0.0, -1.0], [0.0, 1.0, 2.0]]

    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.json() == {"status": "ok", "version": __version__}


class TestErrors:

    def test_mismatch_is_400(self, client):
        resp = client.post("/api/matrix/multiply", json={"A": [[1, 2]], "B": [[1, 2]]})
        assert resp.status_code == 400
        assert resp.json() == {
            "result": None,
            "error": "multiply: requires A.cols == B.rows, got 1x2 and 1x2",
        }

    def test_invalid_json_is_400(self, client):
        resp = client.post(
            "/api/matrix/rref",
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json()["error"].startswith("request: invalid JSON:")

    def test_empty_matrix(self, client):
        resp = client.post("/api/matrix/rref", json={"A": []})
        assert resp.status_code == 400
        assert resp.json()["error"] == "A: matrix has zero rows"

    def test_wrong_method(self, client):
        resp = client.get("/api/matrix/add")
        assert resp.status_code == 405
        assert resp.json() == {"result": None, "error": "request: Method Not Allowed"}

    def test_unknown_route(self, client):
        resp = client.post("/api/matrix/divide", json={"A": [[1]]})
        assert resp.status_code == 404
        assert resp.json() == {"result": None, "error": "request: Not Found"}

    def test_rref_overflow_is_400(self, client):
        resp = client.post("/api/matrix/rref", json={"A": [[1e308, 1e308], [-1e308, 1e308]]})
        assert resp.status_code == 400
        assert resp.json() == {
            "result": None,
            "error": "rref: row 1 overflowed to a non-finite value while eliminating column 0",
        }

    def test_non_numeric_cell(self, client):
        resp = client.post("/api/matrix/add", json={"A": [["x"]], "B": [[1]]})
        assert resp.status_code == 400
        assert resp.json() == {"result": None, "error": "A: cell (0, 0) is not a number, got str"}

    def test_missing_operand(self, client):
        resp = client.post("/api/matrix/multiply", json={"A": [[1]]})
        assert resp.status_code == 400
        assert resp.json() == {"result": None, "error": "B: missing from request"}

    def test_jagged_operand(self, client):
        resp = client.post("/api/matrix/subtract", json={"A": [[1, 2], [3]], "B": [[1]]})
        assert resp.status_code == 400
        assert resp.json()["error"] == "A: row 1 has length 1 (expected 2)"

    def test_non_object_body(self, client):
        resp = client.post("/api/matrix/rref", json=[[1, 2]])
        assert resp.status_code == 400
        assert resp.json()["error"] == "request: expected a JSON object, got list"
