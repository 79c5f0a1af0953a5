from fastapi.testclient import TestClient

from calc_engine.main import app

client = TestClient(app)


def test_health_returns_200():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "loan" in data["calculators"]
    assert "social-security" in data["calculators"]


def test_every_listed_calculator_is_routed():
    paths = {route.path for route in app.routes}
    data = client.get("/api/health").json()
    for name in data["calculators"]:
        assert any(path.startswith(f"/api/{name}") for path in paths), name


def test_budget_no_body_returns_422():
    response = client.post("/api/budget")
    assert response.status_code == 422
