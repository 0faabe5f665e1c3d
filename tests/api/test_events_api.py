"""
Tests for event and account API endpoints.

These test the HTTP layer — status codes, response format,
and error handling. Ledger rules are tested in
test_ledger_engine.py.
"""

from concurrent.futures import ThreadPoolExecutor

from payment_ledger.api.dependencies import ledger_lock


def post(http, **body):
    return http.post("/events", json=body)


class TestPostEvent:

    def test_deposit_returns_201_and_account(self, client):
        response = post(client, type="deposit", client=1, tx=1, amount="10.5")
        assert response.status_code == 201
        assert response.json() == {
            "client": 1,
            "available": "10.5000",
            "held": "0.0000",
            "total": "10.5000",
            "locked": False,
        }

    def test_numeric_amount_accepted(self, client):
        response = post(client, type="deposit", client=1, tx=1, amount=2.25)
        assert response.json()["available"] == "2.2500"

    def test_dispute_without_amount(self, client):
        post(client, type="deposit", client=1, tx=1, amount="10")
        response = post(client, type="dispute", client=1, tx=1)
        assert response.status_code == 201
        assert response.json()["held"] == "10.0000"
        assert response.json()["available"] == "0.0000"

    def test_rejected_event_still_returns_account(self, client):
        post(client, type="deposit", client=1, tx=1, amount="10")
        response = post(client, type="withdrawal", client=1, tx=2, amount="15")
        assert response.status_code == 201
        assert response.json()["available"] == "10.0000"

    def test_chargeback_locks_account(self, client):
        post(client, type="deposit", client=1, tx=1, amount="10")
        post(client, type="dispute", client=1, tx=1)
        response = post(client, type="chargeback", client=1, tx=1)
        assert response.json()["locked"] is True
        assert response.json()["total"] == "0.0000"

    def test_missing_amount_returns_422(self, client):
        response = post(client, type="deposit", client=1, tx=1)
        assert response.status_code == 422

    def test_malformed_amount_returns_422(self, client):
        response = post(client, type="deposit", client=1, tx=1, amount="1.00001")
        assert response.status_code == 422

    def test_unknown_type_returns_422(self, client):
        response = post(client, type="refund", client=1, tx=1, amount="1")
        assert response.status_code == 422


class TestSkippedEvents:

    def test_counts_by_reason(self, client):
        post(client, type="deposit", client=1, tx=1, amount="10")
        post(client, type="deposit", client=1, tx=1, amount="10")
        post(client, type="dispute", client=1, tx=9)
        data = client.get("/events/skipped").json()
        assert data["total"] == 2
        assert data["by_reason"]["DUPLICATE_TRANSACTION"] == 1
        assert data["by_reason"]["UNKNOWN_TRANSACTION"] == 1
        assert data["by_reason"]["ACCOUNT_LOCKED"] == 0


class TestAccounts:

    def test_list_accounts_ordered_by_client(self, client):
        post(client, type="deposit", client=3, tx=1, amount="1")
        post(client, type="deposit", client=1, tx=2, amount="2")
        data = client.get("/accounts").json()
        assert [row["client"] for row in data] == [1, 3]
        assert data[0]["total"] == "2.0000"

    def test_list_accounts_empty(self, client):
        assert client.get("/accounts").json() == []

    def test_get_account(self, client):
        post(client, type="deposit", client=5, tx=1, amount="1")
        response = client.get("/accounts/5")
        assert response.status_code == 200
        assert response.json()["client"] == 5

    def test_unknown_account_returns_404(self, client):
        response = client.get("/accounts/42")
        assert response.status_code == 404


class TestConcurrentPosts:

    def test_parallel_deposits_all_counted(self, client):
        def deposit(tx):
            return post(client, type="deposit", client=1, tx=tx, amount="1")

        with ThreadPoolExecutor(max_workers=8) as pool:
            responses = list(pool.map(deposit, range(1, 51)))

        assert all(r.status_code == 201 for r in responses)
        account = client.get("/accounts/1").json()
        assert account["available"] == "50.0000"
        assert account["total"] == "50.0000"

    def test_parallel_duplicates_apply_once(self, client):
        def deposit(_):
            return post(client, type="deposit", client=1, tx=7, amount="1")

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(deposit, range(20)))

        assert client.get("/accounts/1").json()["total"] == "1.0000"
        assert client.get("/events/skipped").json()["total"] == 19

    def test_apply_and_commit_run_under_lock(self, client, ledger, monkeypatch):
        seen = []
        apply = ledger.apply
        commit = ledger.commit

        def locked_apply(event):
            seen.append(("apply", ledger_lock.locked()))
            return apply(event)

        def locked_commit():
            seen.append(("commit", ledger_lock.locked()))
            return commit()

        monkeypatch.setattr(ledger, "apply", locked_apply)
        monkeypatch.setattr(ledger, "commit", locked_commit)
        post(client, type="deposit", client=1, tx=1, amount="1")

        assert seen == [("apply", True), ("commit", True)]
        assert not ledger_lock.locked()
