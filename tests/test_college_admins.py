from bson import ObjectId


def test_submit_and_list_pending(client, college_admin_payload):
    response = client.post("/collegeAdminData", json=college_admin_payload)
    assert response.status_code == 201
    assert response.json() == {"status": "ok", "message": "College Admin data saved successfully"}

    pending = client.get("/collegeAdmins").json()
    assert len(pending) == 1
    assert pending[0]["branches"] == ["CSE", "ECE"]
    assert pending[0]["noOfBranches"] == 2


def test_submit_requires_every_field(client, college_admin_payload):
    del college_admin_payload["website"]
    assert client.post("/collegeAdminData", json=college_admin_payload).status_code == 400


def test_submit_requires_branches(client, college_admin_payload):
    college_admin_payload["branches"] = []
    assert client.post("/collegeAdminData", json=college_admin_payload).status_code == 400


def test_approve_moves_record_to_approved(client, mongo_db, college_admin_payload):
    client.post("/collegeAdminData", json=college_admin_payload)
    record = client.get("/collegeAdmins").json()[0]

    response = client.post("/approveCollegeAdmin", json=record)
    assert response.status_code == 200
    assert response.text == "College Admin approved"

    assert client.get("/collegeAdmins").json() == []
    approved = mongo_db["approved_college_admins"].find_one({"_id": ObjectId(record["_id"])})
    approved["_id"] = str(approved["_id"])
    assert approved == record


def test_approve_again_after_partial_failure_converges(client, mongo_db, college_admin_payload):
    client.post("/collegeAdminData", json=college_admin_payload)
    record = client.get("/collegeAdmins").json()[0]

    # copy landed, delete did not
    doc = dict(record, _id=ObjectId(record["_id"]))
    mongo_db["approved_college_admins"].insert_one(doc)

    assert client.post("/approveCollegeAdmin", json=record).status_code == 200
    assert mongo_db["college_admins"].count_documents({}) == 0
    assert mongo_db["approved_college_admins"].count_documents({}) == 1


def test_approve_with_malformed_id_is_rejected(client, college_admin_payload):
    record = dict(college_admin_payload, _id="not-an-object-id")
    assert client.post("/approveCollegeAdmin", json=record).status_code == 400


def test_disapprove_deletes_pending(client, mongo_db, college_admin_payload):
    client.post("/collegeAdminData", json=college_admin_payload)
    record = client.get("/collegeAdmins").json()[0]

    response = client.post("/disapproveCollegeAdmin", json={"id": record["_id"]})
    assert response.status_code == 200
    assert response.text == "College Admin disapproved"
    assert mongo_db["college_admins"].count_documents({}) == 0
    assert mongo_db["approved_college_admins"].count_documents({}) == 0


def test_disapprove_unknown_id_is_404(client):
    response = client.post("/disapproveCollegeAdmin", json={"id": str(ObjectId())})
    assert response.status_code == 404


def test_college_data_is_stored(client, mongo_db):
    response = client.post("/colleges", json={"name": "VNIT", "fees": 120000, "city": "Nagpur"})
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "College data added successfully"
    stored = mongo_db["college_data"].find_one({"_id": ObjectId(body["collegeId"])})
    assert stored["fees"] == 120000


def test_empty_college_data_is_rejected(client):
    assert client.post("/colleges", json={}).status_code == 400
