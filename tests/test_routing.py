import pytest

ENDPOINTS = ["/health", "/health/ready", "/health/live", "/api/v1/users", "/api/v1/info"]

CORS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET, POST, PUT, DELETE, OPTIONS",
    "access-control-allow-headers": "Content-Type, Authorization",
}


def assert_cors(resp):
    for name, value in CORS.items():
        assert resp.headers[name] == value


@pytest.mark.parametrize(
    "method,path",
    [
        ("GET", "/"),
        ("GET", "/unknown"),
        ("GET", "/health/"),
        ("GET", "/HEALTH"),
        ("GET", "/api/v1/users/123"),
        ("GET", "/docs"),
        ("GET", "/openapi.json"),
        ("POST", "/health"),
        ("PUT", "/api/v1/users"),
        ("DELETE", "/api/v1/info"),
        ("PATCH", "/nowhere"),
    ],
)
def test_unmatched_routes_return_404(client, method, path):
    resp = client.request(method, path)
    assert resp.status_code == 404
    assert resp.json() == {
        "success": False,
        "error": "Not Found",
        "path": path,
        "method": method,
        "availableEndpoints": ENDPOINTS,
    }
    assert resp.headers["content-type"] == "application/json"
    assert_cors(resp)


def test_not_found_path_excludes_query(client):
    body = client.get("/missing?x=1").json()
    assert body["path"] == "/missing"


@pytest.mark.parametrize("path", ["/", "/health", "/api/v1/users", "/anything/else"])
def test_options_preflight(client, path):
    resp = client.options(path)
    assert resp.status_code == 200
    assert resp.content == b""
    assert_cors(resp)


@pytest.mark.parametrize("path", ENDPOINTS)
def test_known_routes_carry_cors_and_json_headers(client, path):
    resp = client.get(path)
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/json"
    assert_cors(resp)


def test_not_found_path_keeps_percent_encoding(client):
    resp = client.get("/a%20b/%C3%A9")
    assert resp.status_code == 404
    assert resp.json()["path"] == "/a%20b/%C3%A9"
