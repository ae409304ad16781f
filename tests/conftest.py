import os

# Settings refuse to load without a connection string
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import json

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.api.deps import get_blob_store
from app.core.rate_limit import FixedWindowRateLimiter
from app.db.mongodb import get_mongo_db, init_mongo_indexes
from app.utils.file_upload import BlobStore


@pytest.fixture
def mongo_db():
    db = mongomock.MongoClient()["eduguide_test"]
    init_mongo_indexes(db)
    return db


@pytest.fixture
def upload_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def blob_store(upload_dir):
    return BlobStore(str(upload_dir), max_bytes=5 * 1024 * 1024)


@pytest.fixture
def client(mongo_db, blob_store):
    app.dependency_overrides[get_mongo_db] = lambda: mongo_db
    app.dependency_overrides[get_blob_store] = lambda: blob_store
    app.state.rate_limiter = FixedWindowRateLimiter(max_requests=100, window_seconds=900)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def profile_form():
    """Multipart fields of a complete student profile."""
    return {
        "email": "asha@example.com",
        "location": "Pune",
        "pinCode": "411001",
        "marks10": json.dumps({"math": 95, "english": "88", "science": "91"}),
        "is12thCompleted": "true",
        "marks12": json.dumps({"biology": "70", "math": "92", "physics": "85", "chemistry": "80"}),
        "parents": json.dumps({
            "fatherName": "Ravi",
            "motherName": "Meera",
            "fatherOccupation": "Farmer",
            "motherOccupation": "Teacher",
            "fatherSalary": "30000",
            "motherSalary": "25000"
        }),
        "interests": "robotics",
        "hobbies": "chess",
        "fieldOfInterest": "engineering"
    }


@pytest.fixture
def college_admin_payload():
    return {
        "email": "admin@college.edu",
        "location": "Nagpur",
        "pincode": "440001",
        "universityAffiliation": "RTMNU",
        "naacCertPhoto": "/uploads/naac.png",
        "website": "https://college.edu",
        "noOfBranches": 2,
        "branches": ["CSE", "ECE"]
    }
