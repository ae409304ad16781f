import json


def submit(client, form, files=None):
    return client.post("/api/students/submitDetails", data=form, files=files)


def test_submit_profile_stores_decoded_fields_and_files(client, mongo_db, upload_dir, profile_form):
    files = {
        "photo": ("me.png", b"\x89PNG fake", "image/png"),
        "markSheet": ("marks.pdf", b"%PDF-1.4 fake", "application/pdf"),
    }
    response = submit(client, profile_form, files)
    assert response.status_code == 201
    assert response.json()["message"] == "Student details saved successfully"

    doc = mongo_db["students"].find_one({"email": "asha@example.com"})
    assert str(doc["_id"]) == response.json()["id"]
    assert doc["pinCode"] == "411001"
    assert doc["marks10"] == {"math": "95", "english": "88", "science": "91"}
    assert doc["is12thCompleted"] is True
    assert doc["parents"]["fatherSalary"] == "30000"
    assert doc["fieldOfInterest"] == "engineering"

    assert doc["photo"].startswith("/uploads/") and doc["photo"].endswith(".png")
    assert doc["markSheet"].endswith(".pdf")
    stored = doc["photo"].rsplit("/", 1)[-1]
    assert (upload_dir / stored).read_bytes() == b"\x89PNG fake"


def test_submit_profile_without_files(client, mongo_db, profile_form):
    assert submit(client, profile_form).status_code == 201
    doc = mongo_db["students"].find_one({"email": "asha@example.com"})
    assert doc["photo"] is None
    assert doc["markSheet"] is None


def test_malformed_marks_persist_nothing(client, mongo_db, upload_dir, profile_form):
    profile_form["marks10"] = "{math: 95"
    files = {"photo": ("me.png", b"\x89PNG fake", "image/png")}

    response = submit(client, profile_form, files)
    assert response.status_code == 400
    assert "marks10" in response.json()["detail"]
    assert mongo_db["students"].count_documents({}) == 0
    assert list(upload_dir.iterdir()) == []


def test_submit_profile_requires_email(client, profile_form):
    del profile_form["email"]
    assert submit(client, profile_form).status_code == 400


def test_oversized_file_is_rejected(client, blob_store, mongo_db, profile_form):
    blob_store.max_bytes = 10
    files = {"photo": ("big.png", b"x" * 11, "image/png")}
    response = submit(client, profile_form, files)
    assert response.status_code == 413
    assert mongo_db["students"].count_documents({}) == 0


def test_get_by_email_returns_full_record(client, profile_form):
    submit(client, profile_form)

    response = client.get("/api/students/byEmail", params={"email": "asha@example.com"})
    assert response.status_code == 200
    body = response.json()
    assert body["email"] == "asha@example.com"
    assert body["parents"] == json.loads(profile_form["parents"])
    assert body["marks12"]["physics"] == "85"
    assert "_id" in body


def test_get_by_email_unknown_is_404(client):
    response = client.get("/api/students/byEmail", params={"email": "nobody@example.com"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Student not found"


def test_get_by_email_requires_email(client):
    assert client.get("/api/students/byEmail").status_code == 400


def test_recommendation_info_is_a_subset(client, profile_form):
    submit(client, profile_form)

    response = client.get("/api/students/recommendationInfo", params={"email": "asha@example.com"})
    assert response.status_code == 200
    assert response.json() == {
        "email": "asha@example.com",
        "location": "Pune",
        "fatherSalary": "30000",
        "motherSalary": "25000"
    }


def test_recommendation_info_unknown_is_404(client):
    response = client.get("/api/students/recommendationInfo", params={"email": "nobody@example.com"})
    assert response.status_code == 404


def test_list_students_returns_every_profile(client, profile_form):
    submit(client, profile_form)
    profile_form["email"] = "ravi@example.com"
    submit(client, profile_form)

    response = client.get("/students")
    assert response.status_code == 200
    assert sorted(s["email"] for s in response.json()) == ["asha@example.com", "ravi@example.com"]


def test_uploaded_file_is_served_back(client, mongo_db, profile_form):
    files = {"photo": ("me.png", b"\x89PNG fake", "image/png")}
    submit(client, profile_form, files)
    photo = mongo_db["students"].find_one()["photo"]

    response = client.get(photo)
    assert response.status_code == 200
    assert response.content == b"\x89PNG fake"


def test_missing_upload_is_404(client):
    assert client.get("/uploads/does-not-exist.png").status_code == 404
