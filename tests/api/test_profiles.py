PROFILE = {
    "id": "user-1",
    "full_name": "Jane Doe",
    "email": "jane@fithubgym.com",
    "phone": "555-0101",
    "height": 170.5,
    "weight": 65.0,
    "date_of_birth": "1990-04-12",
    "created_at": "2025-04-14T10:00:00+00:00",
}


def test_get_own_profile(client, fake_supabase, act_as):
    act_as("client")
    fake_supabase.queue("profiles", data=PROFILE)

    response = client.get("/api/v1/profiles/me")

    assert response.status_code == 200
    assert response.json()["full_name"] == "Jane Doe"
    assert fake_supabase.queries_for("profiles")[0].called("eq") == [(("id", "user-1"), {})]


def test_missing_profile_is_404(client, fake_supabase, act_as):
    act_as("client")
    fake_supabase.queue("profiles", data=None)

    assert client.get("/api/v1/profiles/me").status_code == 404


def test_update_own_profile_only_sends_given_fields(client, fake_supabase, act_as):
    act_as("client")
    fake_supabase.queue("profiles", data=[{**PROFILE, "full_name": "Jane Smith", "weight": 63.0}])

    response = client.put("/api/v1/profiles/me", json={"full_name": "Jane Smith", "weight": 63})

    assert response.status_code == 200
    payload = fake_supabase.queries_for("profiles")[0].payload("update")
    assert payload["full_name"] == "Jane Smith"
    assert payload["weight"] == 63
    assert "phone" not in payload
    assert "updated_at" in payload


def test_update_profile_rejects_short_name_and_negative_height(client, act_as):
    act_as("client")
    response = client.put("/api/v1/profiles/me", json={"full_name": "J", "height": 0})
    assert response.status_code == 422


def test_list_profiles_is_admin_only(client, fake_supabase, act_as):
    act_as("client")
    assert client.get("/api/v1/profiles").status_code == 403

    act_as("admin", user_id="admin-1")
    fake_supabase.queue("profiles", data=[PROFILE])
    response = client.get("/api/v1/profiles?limit=5&offset=10")
    assert response.status_code == 200
    query = fake_supabase.queries_for("profiles")[0]
    assert query.called("limit") == [((5,), {})]
    assert query.called("offset") == [((10,), {})]
