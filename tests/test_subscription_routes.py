"""
API tests for /api/subscriptions.
"""
import uuid


def _create(client, **payload):
    body = {"merchant_name": "Netflix", "amount": 15.99, "billing_interval": "Monthly", "status": "Active"}
    body.update(payload)
    response = client.post("/api/subscriptions", json=body)
    assert response.status_code == 201
    return response


def test_root_liveness(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "WiseWallet API is running"}


class TestCreateSubscription:
    def test_create_returns_created_with_location(self, client):
        response = _create(client, category="Streaming")
        data = response.json()

        assert response.headers["location"] == f"/api/subscriptions/{data['id']}"
        assert data["merchant_name"] == "Netflix"
        assert data["category"] == "Streaming"
        assert data["amount"] == 15.99
        assert data["monthly_equivalent"] == 15.99
        assert data["has_price_increased"] is False
        assert data["created_at"] is not None

    def test_location_resolves(self, client):
        response = _create(client)
        fetched = client.get(response.headers["location"])
        assert fetched.status_code == 200
        assert fetched.json()["id"] == response.json()["id"]

    def test_yearly_monthly_equivalent(self, client):
        data = _create(client, amount=100.00, billing_interval="Yearly").json()
        assert data["monthly_equivalent"] == 8.33

    def test_blank_category_defaults_to_general(self, client):
        assert _create(client, category="   ").json()["category"] == "General"
        assert _create(client).json()["category"] == "General"

    def test_client_supplied_id_and_flags_are_ignored(self, client):
        supplied = str(uuid.uuid4())
        data = _create(
            client,
            id=supplied,
            previous_amount=5.00,
            amount=20.00,
            has_price_increased=True,
            created_at="2001-01-01T00:00:00",
        ).json()
        assert data["id"] != supplied
        assert data["has_price_increased"] is False
        assert data["previous_amount"] == 5.00
        assert not data["created_at"].startswith("2001")

    def test_missing_fields_get_defaults(self, client):
        response = client.post("/api/subscriptions", json={})
        assert response.status_code == 201
        data = response.json()
        assert data["merchant_name"] == ""
        assert data["amount"] == 0
        assert data["billing_interval"] == "Monthly"
        assert data["status"] == "Active"
        assert data["next_billing_date"] is None

    def test_unknown_interval_is_kept_and_treated_as_monthly(self, client):
        data = _create(client, amount=30, billing_interval="Quarterly").json()
        assert data["billing_interval"] == "Quarterly"
        assert data["monthly_equivalent"] == 30


class TestListSubscriptions:
    def test_empty(self, client):
        response = client.get("/api/subscriptions")
        assert response.status_code == 200
        assert response.json() == []

    def test_ordered_by_merchant_name(self, client):
        for name in ["Spotify", "Amazon Prime", "Netflix"]:
            _create(client, merchant_name=name)
        names = [s["merchant_name"] for s in client.get("/api/subscriptions").json()]
        assert names == ["Amazon Prime", "Netflix", "Spotify"]


class TestUpdateSubscription:
    def test_price_increase_shifts_previous_amount(self, client):
        sub_id = _create(client, amount=15.99, category="Streaming").json()["id"]

        response = client.put(f"/api/subscriptions/{sub_id}", json={
            "amount": 19.99,
            "billing_interval": "Monthly",
            "status": "Active",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["previous_amount"] == 15.99
        assert data["amount"] == 19.99
        assert data["has_price_increased"] is True
        assert data["monthly_equivalent"] == 19.99

    def test_price_decrease_clears_flag(self, client):
        sub_id = _create(client, amount=10.00).json()["id"]
        client.put(f"/api/subscriptions/{sub_id}", json={"amount": 12.00})
        data = client.put(f"/api/subscriptions/{sub_id}", json={"amount": 11.00}).json()
        assert data["previous_amount"] == 12.00
        assert data["has_price_increased"] is False

    def test_blank_category_keeps_existing(self, client):
        sub_id = _create(client, category="Streaming").json()["id"]
        data = client.put(f"/api/subscriptions/{sub_id}", json={"amount": 15.99, "category": ""}).json()
        assert data["category"] == "Streaming"

    def test_omitted_category_keeps_existing(self, client):
        sub_id = _create(client, category="Streaming").json()["id"]
        data = client.put(f"/api/subscriptions/{sub_id}", json={"amount": 17.99}).json()
        assert data["category"] == "Streaming"

    def test_category_and_interval_change(self, client):
        sub_id = _create(client, amount=10.00).json()["id"]
        data = client.put(f"/api/subscriptions/{sub_id}", json={
            "amount": 120.00,
            "category": "Video",
            "billing_interval": "Yearly",
            "status": "Cancelled",
            "next_billing_date": "2027-01-15T00:00:00",
        }).json()
        assert data["category"] == "Video"
        assert data["monthly_equivalent"] == 10.00
        assert data["status"] == "Cancelled"
        assert data["next_billing_date"].startswith("2027-01-15")

    def test_merchant_and_created_at_are_not_updated(self, client):
        created = _create(client, merchant_name="Hulu").json()
        data = client.put(f"/api/subscriptions/{created['id']}", json={
            "amount": 7.99,
            "merchant_name": "Other",
            "created_at": "2001-01-01T00:00:00",
        }).json()
        assert data["merchant_name"] == "Hulu"
        assert data["created_at"] == created["created_at"]

    def test_unknown_id_returns_404(self, client):
        response = client.put(f"/api/subscriptions/{uuid.uuid4()}", json={"amount": 1})
        assert response.status_code == 404
        assert response.json()["detail"] == "Subscription not found"

    def test_get_unknown_id_returns_404(self, client):
        assert client.get(f"/api/subscriptions/{uuid.uuid4()}").status_code == 404

    def test_malformed_id_is_rejected(self, client):
        assert client.put("/api/subscriptions/not-a-uuid", json={"amount": 1}).status_code == 422


class TestAmountPrecision:
    """Monthly amounts are stored and returned without rounding to cents."""

    def test_monthly_amount_is_unchanged_across_create_get_and_update(self, client):
        created = _create(client, amount=9.999, billing_interval="Monthly")
        data = created.json()
        assert data["amount"] == 9.999
        assert data["monthly_equivalent"] == 9.999

        fetched = client.get(created.headers["location"]).json()
        assert fetched["amount"] == 9.999
        assert fetched["monthly_equivalent"] == 9.999

        listed = client.get("/api/subscriptions").json()
        assert listed[0]["amount"] == 9.999

        updated = client.put(f"/api/subscriptions/{data['id']}", json={"amount": 12.3456}).json()
        assert updated["previous_amount"] == 9.999
        assert updated["amount"] == 12.3456
        assert updated["monthly_equivalent"] == 12.3456

    def test_yearly_monthly_equivalent_is_still_rounded(self, client):
        data = _create(client, amount=100.005, billing_interval="Yearly").json()
        assert data["amount"] == 100.005
        assert data["monthly_equivalent"] == 8.33
