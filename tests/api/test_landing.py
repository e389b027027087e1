def test_landing_content(client):
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["brand"] == "FitHub"
    assert data["headline"] == "Transform Your Body, Transform Your Life"
    assert [a["href"] for a in data["actions"]] == ["/register", "/login"]
    assert [f["title"] for f in data["features"]] == ["Expert Trainers", "Modern Equipment", "Flexible Plans"]


def test_health_and_ready(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/ready").json() == {"status": "ready"}


def test_ready_reports_unavailable_database(client, fake_supabase):
    fake_supabase.queue("memberships", error=Exception("connection refused"))

    response = client.get("/ready")

    assert response.status_code == 503
    assert response.json() == {"status": "unavailable"}


def test_security_headers(client):
    response = client.get("/health")
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
