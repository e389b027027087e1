def test_list_trainers_with_client_load(client, fake_supabase, act_as):
    act_as("client")
    fake_supabase.queue("trainers", data=[
        {"id": "t1", "specialization": "Strength", "experience_years": 8},
        {"id": "t2", "specialization": "Yoga", "experience_years": 3},
    ])
    fake_supabase.queue("profiles", data=[
        {"id": "t1", "full_name": "Sam Lift"},
        {"id": "t2", "full_name": "Ada Flow"},
    ])
    fake_supabase.queue("user_memberships", data=[{"trainer_id": "t1"}, {"trainer_id": "t1"}])

    response = client.get("/api/v1/trainers")

    assert response.status_code == 200
    data = {t["id"]: t for t in response.json()}
    assert data["t1"]["full_name"] == "Sam Lift"
    assert data["t1"]["active_clients"] == 2
    assert data["t2"]["active_clients"] == 0
    assert data["t1"]["capacity"] == 10


def test_promote_member_to_trainer(client, fake_supabase, act_as):
    act_as("admin")
    fake_supabase.queue("profiles", data={"id": "u9", "full_name": "New Coach"})
    fake_supabase.queue("trainers", data=[{"id": "u9", "specialization": "HIIT", "experience_years": 2}])
    fake_supabase.queue("users", data=[{"id": "u9", "role": "trainer"}])

    response = client.post(
        "/api/v1/trainers",
        json={"user_id": "u9", "specialization": "HIIT", "experience_years": 2},
    )

    assert response.status_code == 201
    assert response.json()["full_name"] == "New Coach"
    assert fake_supabase.queries_for("trainers")[0].payload("insert")["id"] == "u9"
    assert fake_supabase.queries_for("users")[0].payload("update") == {"role": "trainer"}


def test_promote_removes_trainer_row_when_role_update_fails(client, fake_supabase, act_as):
    act_as("admin")
    fake_supabase.queue("profiles", data={"id": "u9", "full_name": "New Coach"})
    fake_supabase.queue("trainers", data=[{"id": "u9", "specialization": "HIIT", "experience_years": 2}])
    fake_supabase.queue("users", error=Exception("connection reset"))

    response = client.post(
        "/api/v1/trainers",
        json={"user_id": "u9", "specialization": "HIIT", "experience_years": 2},
    )

    assert response.status_code == 500
    insert_query, delete_query = fake_supabase.queries_for("trainers")
    assert insert_query.called("insert")
    assert delete_query.called("delete")
    assert delete_query.called("eq") == [(("id", "u9"), {})]


def test_promote_unknown_user_is_rolled_back(client, fake_supabase, act_as):
    act_as("admin")
    fake_supabase.queue("profiles", data={"id": "u9", "full_name": "New Coach"})
    fake_supabase.queue("trainers", data=[{"id": "u9", "specialization": "HIIT", "experience_years": 2}])
    fake_supabase.queue("users", data=[])

    response = client.post(
        "/api/v1/trainers",
        json={"user_id": "u9", "specialization": "HIIT", "experience_years": 2},
    )

    assert response.status_code == 404
    assert fake_supabase.queries_for("trainers")[1].called("delete")


def test_promote_requires_admin_role(client, act_as):
    act_as("trainer")
    response = client.post("/api/v1/trainers", json={"user_id": "u9", "specialization": "HIIT", "experience_years": 2})
    assert response.status_code == 403


def test_trainer_sees_only_own_clients(client, fake_supabase, act_as):
    act_as("trainer", user_id="t1")
    fake_supabase.queue("trainer_clients", data=[{
        "trainer_id": "t1",
        "trainer_name": "Sam Lift",
        "client_name": "Jane Doe",
        "membership_plan": "Monthly",
        "start_date": "2025-04-01",
        "end_date": "2025-05-01",
    }])

    assert client.get("/api/v1/trainers/t1/clients").json()[0]["client_name"] == "Jane Doe"
    assert client.get("/api/v1/trainers/t2/clients").status_code == 403


def test_clients_cannot_list_trainer_clients(client, act_as):
    act_as("client")
    assert client.get("/api/v1/trainers/t1/clients").status_code == 403
