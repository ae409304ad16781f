def test_record_transaction_starts_pending(client, mongo_db):
    response = client.post("/transactions", json={"email": "asha@example.com", "orderId": "order_1", "amount": 499})
    assert response.status_code == 201
    body = response.json()
    assert body["orderId"] == "order_1"
    assert body["amount"] == 499
    assert body["status"] == "pending"
    assert body["timestamp"]
    assert mongo_db["transactions"].count_documents({"orderId": "order_1"}) == 1


def test_record_transaction_validates_schema(client):
    response = client.post("/transactions", json={"email": "asha@example.com", "orderId": "order_1", "amount": "lots"})
    assert response.status_code == 400

    response = client.post("/transactions", json={"email": "asha@example.com", "amount": 10})
    assert response.status_code == 400


def test_payment_status_updates_existing_record(client, mongo_db):
    created = client.post("/transactions", json={"email": "asha@example.com", "orderId": "order_1", "amount": 499}).json()

    response = client.post("/payment-status", json={"orderId": "order_1", "status": "completed"})
    assert response.status_code == 200
    body = response.json()
    assert body["_id"] == created["_id"]
    assert body["status"] == "completed"
    assert body["email"] == "asha@example.com"
    assert mongo_db["transactions"].count_documents({}) == 1


def test_payment_status_for_unknown_order_creates_record(client, mongo_db):
    response = client.post("/payment-status", json={"orderId": "order_404", "status": "failed"})
    assert response.status_code == 200
    body = response.json()
    assert body["orderId"] == "order_404"
    assert body["status"] == "failed"

    doc = mongo_db["transactions"].find_one({"orderId": "order_404"})
    assert doc["status"] == "failed"
    assert doc["timestamp"] is not None


def test_payment_status_accepts_any_status_string(client):
    response = client.post("/payment-status", json={"orderId": "order_2", "status": "refund_initiated"})
    assert response.status_code == 200
    assert response.json()["status"] == "refund_initiated"
