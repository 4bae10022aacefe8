"""Insurance, dashboard, bank verification and deletion routes."""
from internship_portal.core.auth import create_access_token
from internship_portal.core.errors import StorageUnavailableError


def test_dashboard_requires_token(client, registered):
    user_id, _ = registered
    response = client.get(f"/api/dashboard/{user_id}")
    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_dashboard_other_user_forbidden(client, registered):
    user_id, _ = registered
    headers = {"Authorization": f"Bearer {create_access_token('someone-else')}"}
    assert client.get(f"/api/dashboard/{user_id}", headers=headers).status_code == 403


def test_dashboard_missing_user(client):
    headers = {"Authorization": f"Bearer {create_access_token('missing')}"}
    response = client.get("/api/dashboard/missing", headers=headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"


def test_dashboard_before_insurance(client, registered):
    user_id, headers = registered
    body = client.get(f"/api/dashboard/{user_id}", headers=headers).json()
    assert body["user"]["email"] == "asha@example.com"
    assert body["user"]["insuranceStatus"] == "incomplete"
    assert body["insurance"] is None


def test_complete_insurance_updates_dashboard(client, registered):
    user_id, headers = registered
    response = client.post(
        "/api/complete-insurance",
        json={"userId": user_id, "policyNumber": "POL-1"},
        headers=headers,
    )
    assert response.status_code == 200
    assert response.json()["message"] == "Insurance process completed successfully"

    body = client.get(f"/api/dashboard/{user_id}", headers=headers).json()
    assert body["user"]["insuranceStatus"] == "completed"
    assert body["insurance"]["policyNumber"] == "POL-1"
    assert body["insurance"]["status"] == "active"
    assert body["insurance"]["userId"] == user_id


def test_verify_bank_account_match(client, registered):
    user_id, headers = registered
    response = client.post(
        "/api/verify-bank-account",
        json={"userId": user_id, "aadhaarNumber": "123412341234"},
        headers=headers,
    )
    assert response.json() == {"message": "Bank account verified successfully", "status": "verified"}

    body = client.get(f"/api/dashboard/{user_id}", headers=headers).json()
    assert body["user"]["bankAccountStatus"] == "verified"


def test_verify_bank_account_mismatch_keeps_status(client, registered):
    user_id, headers = registered
    response = client.post(
        "/api/verify-bank-account",
        json={"userId": user_id, "aadhaarNumber": "000000000000"},
        headers=headers,
    )
    assert response.status_code == 200
    assert response.json()["status"] == "failed"

    body = client.get(f"/api/dashboard/{user_id}", headers=headers).json()
    assert body["user"]["bankAccountStatus"] == "pending"


def test_delete_user_removes_related_records(client, store, registered):
    user_id, headers = registered
    client.post("/api/complete-insurance", json={"userId": user_id, "policyNumber": "P"}, headers=headers)
    client.post("/api/internship-recommendations", json={"workMode": "any"}, headers=headers)

    response = client.delete(f"/api/delete-user/{user_id}", headers=headers)
    assert response.status_code == 200
    body = response.json()
    assert body["deletedUser"] == {"name": "Asha Verma", "email": "asha@example.com"}

    assert store.count("users", {"_id": user_id}) == 0
    assert store.count("insurances", {"user_id": user_id}) == 0
    assert store.count("internship_preferences", {"user_id": user_id}) == 0
    assert client.delete(f"/api/delete-user/{user_id}", headers=headers).status_code == 404


def test_storage_outage_is_503(client, store, registered, monkeypatch):
    user_id, headers = registered

    def unavailable(*args, **kwargs):
        raise StorageUnavailableError()

    monkeypatch.setattr(store, "find_one", unavailable)
    response = client.get(f"/api/dashboard/{user_id}", headers=headers)
    assert response.status_code == 503
    assert "Retry-After" in response.headers
