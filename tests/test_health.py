import shutil


def test_health_reports_database_and_uploads(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == "healthy"
    assert data["uploads"] == "writable"
    assert data["service"] == "storefront-api"


def test_health_unhealthy_without_upload_dir(client, settings):
    shutil.rmtree(settings.UPLOAD_DIR)
    data = client.get("/health").json()
    assert data["uploads"] == "missing"
    assert data["status"] == "unhealthy"
    assert data["database"] == "healthy"


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"
