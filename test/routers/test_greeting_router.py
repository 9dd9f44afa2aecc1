import pytest
from fastapi.testclient import TestClient

from greeter.main import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


@pytest.mark.parametrize(
    "path, expected_body",
    [
        ("/api/Java", "Hello Java!"),
        ("/api/Spring", "Hello Spring!"),
        ("/api/RodJohnson", "Hello RodJohnson!"),
    ],
)
def test_greet(client, path, expected_body):
    # when
    response = client.get(path)

    # then
    assert response.status_code == 200
    assert response.text == expected_body
    assert response.headers["content-type"] == "text/plain; charset=utf-8"


def test_greet_decodes_path_segment(client):
    response = client.get("/api/Rod%20Johnson")

    assert response.status_code == 200
    assert response.text == "Hello Rod Johnson!"


def test_greet_non_ascii_name(client):
    response = client.get("/api/Zoë")

    assert response.status_code == 200
    assert response.content == "Hello Zoë!".encode("utf-8")


def test_greet_ignores_query_parameters(client):
    response = client.get("/api/Java", params={"lang": "de"})

    assert response.status_code == 200
    assert response.text == "Hello Java!"


def test_greet_is_idempotent(client):
    first = client.get("/api/Spring")
    second = client.get("/api/Spring")

    assert first.content == second.content == b"Hello Spring!"


def test_interleaved_requests_do_not_mix(client):
    names = ["Java", "Spring", "RodJohnson", "Java", "Spring"]

    bodies = [client.get(f"/api/{name}").text for name in names]

    assert bodies == [f"Hello {name}!" for name in names]


@pytest.mark.parametrize("path", ["/api/", "/api", "/api/a/b", "/api/a%2Fb", "/Java"])
def test_unmatched_paths_are_not_found(client, path):
    response = client.get(path)

    assert response.status_code == 404


def test_other_methods_are_not_allowed(client):
    response = client.post("/api/Java")

    assert response.status_code == 405
