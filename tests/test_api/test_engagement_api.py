"""Tests for review, quote request and contact endpoints."""

import pytest

MOVESURE_ID = "1c7a9b63-7d2e-4a8f-8b4c-3e6f9d2a5b21"
PENDING_ID = "5abe3fa7-b16c-4ecd-8f80-7cad3b6e9f65"


def disable_flag(db, flag_id):
    db.execute("UPDATE feature_flags SET enabled = false WHERE id = ?", [flag_id])


class TestReviews:
    """Tests for POST /api/reviews."""

    def test_review_updates_rating(self, client):
        review = {
            "supplier_id": MOVESURE_ID,
            "rating": 5,
            "title": "Quick claim",
            "content": "Claim paid within a week, no fuss at all.",
        }

        response = client.post("/api/reviews", json=review)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Review submitted successfully!"
        assert body["data"]["rating"] == 5
        assert body["data"]["verified"] is False

        supplier = client.get("/api/suppliers/movesure-insurance").json()["data"]
        assert supplier["rating_average"] == 5.0
        assert supplier["rating_count"] == 1
        assert [r["title"] for r in supplier["reviews"]] == ["Quick claim"]

    def test_rating_is_averaged(self, client):
        for rating in (4, 5):
            client.post(
                "/api/reviews",
                json={"supplier_id": MOVESURE_ID, "rating": rating, "content": "Solid insurer overall."},
            )

        supplier = client.get("/api/suppliers/movesure-insurance").json()["data"]
        assert supplier["rating_average"] == 4.5
        assert supplier["rating_count"] == 2

    def test_invalid_review(self, client):
        response = client.post(
            "/api/reviews",
            json={"supplier_id": MOVESURE_ID, "rating": 7, "content": "Short"},
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Please check the form for errors",
            "details": {
                "rating": "Rating must be between 1 and 5",
                "content": "Review must be at least 10 characters",
            },
        }

    def test_review_for_unlisted_supplier(self, client):
        response = client.post(
            "/api/reviews",
            json={"supplier_id": PENDING_ID, "rating": 4, "content": "Never heard back."},
        )
        assert response.status_code == 404
        assert response.json()["error"] == "Supplier not found"

    def test_reviews_disabled(self, client, api_db):
        disable_flag(api_db, "reviews_system")

        response = client.post(
            "/api/reviews",
            json={"supplier_id": MOVESURE_ID, "rating": 4, "content": "Solid insurer overall."},
        )

        assert response.status_code == 403
        assert response.json() == {"success": False, "error": "This feature is currently unavailable"}


@pytest.fixture
def quote(acme_id):
    return {
        "supplier_id": acme_id,
        "requester_name": "Jo Smith",
        "requester_email": "jo@smithremovals.example.com",
        "company_name": "Smith Removals",
        "budget_range": "£1,000-£5,000",
        "message": "Looking for a CRM for a team of 12 movers.",
    }


class TestQuoteRequests:
    """Tests for POST /api/quotes."""

    def test_quote_request(self, client, api_db, quote, acme_id):
        response = client.post("/api/quotes", json=quote)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Quote request sent successfully!"
        assert body["data"]["status"] == "new"
        assert body["data"]["supplier_id"] == acme_id

        stored = api_db.fetch_one(
            "SELECT status, source FROM quote_requests WHERE id = ?", [body["data"]["id"]]
        )
        assert stored == ("new", "website")
        assert api_db.fetch_one(
            "SELECT contact_count FROM suppliers WHERE id = ?", [acme_id]
        )[0] == 1

    def test_supplier_not_accepting_quotes(self, client, quote, bundle_id):
        quote["supplier_id"] = bundle_id

        response = client.post("/api/quotes", json=quote)

        assert response.status_code == 400
        assert response.json()["error"] == "This supplier is not accepting quote requests"

    def test_unknown_supplier(self, client, quote):
        quote["supplier_id"] = "00000000-0000-4000-8000-000000000000"
        assert client.post("/api/quotes", json=quote).status_code == 404

    def test_invalid_quote(self, client, quote):
        quote["requester_email"] = "jo"

        response = client.post("/api/quotes", json=quote)

        assert response.status_code == 400
        assert response.json()["details"] == {"requester_email": "Please enter a valid email address"}

    def test_quotes_disabled(self, client, api_db, quote):
        disable_flag(api_db, "quote_requests")
        assert client.post("/api/quotes", json=quote).status_code == 403


class TestContactMessages:
    """Tests for POST /api/contact."""

    def test_general_message(self, client):
        response = client.post(
            "/api/contact",
            json={
                "name": "Sam Patel",
                "email": "sam@example.com",
                "subject": "Listing question",
                "message": "How long does approval usually take?",
            },
        )

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "new"
        assert response.json()["message"] == "Message sent successfully!"

    def test_message_to_supplier_counts_contact(self, client, api_db, acme_id):
        client.post(
            "/api/contact",
            json={
                "name": "Sam Patel",
                "email": "sam@example.com",
                "message": "Do you integrate with Xero?",
                "supplier_id": acme_id,
            },
        )

        assert api_db.fetch_one(
            "SELECT contact_count FROM suppliers WHERE id = ?", [acme_id]
        )[0] == 1

    def test_message_to_unknown_supplier(self, client):
        response = client.post(
            "/api/contact",
            json={
                "name": "Sam Patel",
                "email": "sam@example.com",
                "message": "Do you integrate with Xero?",
                "supplier_id": PENDING_ID,
            },
        )
        assert response.status_code == 404

    def test_invalid_message(self, client):
        response = client.post("/api/contact", json={"name": "S", "email": "sam@example.com"})

        assert response.status_code == 400
        assert response.json()["details"] == {
            "name": "Name must be at least 2 characters",
            "message": "Message is required",
        }
