from fastapi.testclient import TestClient

from app.main import app


def test_health_ok(client: TestClient):
    """Test health check endpoint"""
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["database"] == "ok"


def test_root_endpoint(client: TestClient):
    """Test root endpoint"""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Employee Records Service"
    assert data["status"] == "ok"
    assert data["api"] == "/api/v1"


def test_lifespan_opens_session_factory():
    """The engine and session factory exist while the app is running"""
    with TestClient(app) as client:
        assert client.get("/health").status_code == 200
        assert app.state.session_factory is not None
        assert app.state.engine is not None
