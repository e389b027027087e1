from datetime import date

MEMBERSHIP_ROW = {
    "id": "um-1",
    "user_id": "user-1",
    "membership_id": "plan-1",
    "trainer_id": "t1",
    "start_date": "2025-01-31",
    "end_date": "2025-02-28",
    "status": "active",
}


def test_enroll_creates_membership_and_pending_payment(client, fake_supabase, act_as):
    act_as("admin")
    fake_supabase.queue("memberships", data={"duration_months": 1, "price": 49.0})
    fake_supabase.queue("user_memberships", data=[MEMBERSHIP_ROW])
    fake_supabase.queue("payments", data=[{"id": "pay-1"}])

    response = client.post("/api/v1/user-memberships", json={
        "user_id": "user-1",
        "membership_id": "plan-1",
        "trainer_id": "t1",
        "start_date": "2025-01-31",
        "payment_method": "card",
    })

    assert response.status_code == 201
    data = response.json()
    assert data["payment_id"] == "pay-1"
    assert data["amount_due"] == 49.0

    membership = fake_supabase.queries_for("user_memberships")[0].payload("insert")
    assert membership["end_date"] == "2025-02-28"
    assert membership["status"] == "active"

    payment = fake_supabase.queries_for("payments")[0].payload("insert")
    assert payment["status"] == "pending"
    assert payment["amount"] == 49.0
    assert payment["payment_method"] == "card"
    assert payment["payment_date"] == date.today().isoformat()


def test_enroll_unknown_plan_is_404(client, fake_supabase, act_as):
    act_as("admin")
    fake_supabase.queue("memberships", data=None)

    response = client.post("/api/v1/user-memberships", json={"user_id": "user-1", "membership_id": "nope"})

    assert response.status_code == 404
    assert fake_supabase.queries_for("user_memberships") == []


def test_enroll_with_full_trainer_is_conflict(client, fake_supabase, act_as, db_error):
    act_as("admin")
    fake_supabase.queue("memberships", data={"duration_months": 3, "price": 135.0})
    fake_supabase.queue(
        "user_memberships",
        error=db_error("Trainer has reached maximum client capacity", code="P0001"),
    )

    response = client.post("/api/v1/user-memberships", json={
        "user_id": "user-1", "membership_id": "plan-1", "trainer_id": "t1",
    })

    assert response.status_code == 409
    assert response.json()["detail"] == "Trainer has reached maximum client capacity"
    assert fake_supabase.queries_for("payments") == []


def test_enroll_removes_membership_when_payment_fails(client, fake_supabase, act_as):
    act_as("admin")
    fake_supabase.queue("memberships", data={"duration_months": 1, "price": 49.0})
    fake_supabase.queue("user_memberships", data=[MEMBERSHIP_ROW])
    fake_supabase.queue("payments", error=Exception("connection reset"))

    response = client.post("/api/v1/user-memberships", json={
        "user_id": "user-1", "membership_id": "plan-1", "trainer_id": "t1",
    })

    assert response.status_code == 500
    insert_query, delete_query = fake_supabase.queries_for("user_memberships")
    assert insert_query.called("insert")
    assert delete_query.called("delete")
    assert delete_query.called("eq") == [(("id", "um-1"), {})]


def test_enroll_requires_admin(client, act_as):
    act_as("trainer")
    response = client.post("/api/v1/user-memberships", json={"user_id": "user-1", "membership_id": "plan-1"})
    assert response.status_code == 403


def test_client_only_lists_own_memberships(client, fake_supabase, act_as):
    act_as("client", user_id="user-1")
    fake_supabase.queue("user_memberships", data=[MEMBERSHIP_ROW])

    response = client.get("/api/v1/user-memberships?user_id=someone-else")

    assert response.status_code == 200
    assert ("user_id", "user-1") in [args for args, _ in fake_supabase.queries_for("user_memberships")[0].called("eq")]


def test_admin_filters_by_status(client, fake_supabase, act_as):
    act_as("admin")
    fake_supabase.queue("user_memberships", data=[])

    response = client.get("/api/v1/user-memberships?status=expired")

    assert response.status_code == 200
    assert fake_supabase.queries_for("user_memberships")[0].called("eq") == [(("status", "expired"), {})]


def test_invalid_status_filter_is_rejected(client, act_as):
    act_as("admin")
    assert client.get("/api/v1/user-memberships?status=frozen").status_code == 422


def test_cancel_active_membership(client, fake_supabase, act_as):
    act_as("admin")
    fake_supabase.queue("user_memberships", data=MEMBERSHIP_ROW)
    fake_supabase.queue("user_memberships", data=[{**MEMBERSHIP_ROW, "status": "cancelled"}])

    response = client.post("/api/v1/user-memberships/um-1/cancel")

    assert response.status_code == 200
    assert response.json()["status"] == "cancelled"


def test_cancel_expired_membership_is_rejected(client, fake_supabase, act_as):
    act_as("admin")
    fake_supabase.queue("user_memberships", data={**MEMBERSHIP_ROW, "status": "expired"})

    response = client.post("/api/v1/user-memberships/um-1/cancel")

    assert response.status_code == 400


def test_expire_overdue_memberships(client, fake_supabase, act_as):
    act_as("admin")
    fake_supabase.queue("user_memberships", data=[{"id": "um-1"}, {"id": "um-2"}])

    response = client.post("/api/v1/user-memberships/expire")

    assert response.status_code == 200
    assert response.json()["expired"] == 2
    query = fake_supabase.queries_for("user_memberships")[0]
    assert query.payload("update")["status"] == "expired"
    assert query.called("eq") == [(("status", "active"), {})]
    assert query.called("lt") == [(("end_date", date.today().isoformat()), {})]


def test_upcoming_renewals(client, fake_supabase, act_as):
    act_as("admin")
    fake_supabase.queue("upcoming_renewals", data=[{
        "full_name": "Jane Doe",
        "email": "jane@fithubgym.com",
        "membership_plan": "Monthly",
        "end_date": "2025-05-01",
        "renewal_amount": "49.00",
    }])

    response = client.get("/api/v1/user-memberships/renewals")

    assert response.status_code == 200
    assert response.json()[0]["renewal_amount"] == 49.0
