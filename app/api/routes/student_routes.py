"""
Student Routes

POST /api/students/submitDetails - Create student profile (multipart, with photo + mark sheet)
GET /api/students/byEmail - Full profile by email
GET /api/students/recommendationInfo - Email, location and parents' salaries
GET /students - Every profile
"""

from typing import Optional, Type
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as SchemaError

from app.api.deps import get_blob_store, get_student_service
from app.core.errors import ValidationError
from app.services.mongo_service import StudentProfileService
from app.utils.file_upload import BlobStore
from app.schemas.schemas import (
    StudentProfileCreate, Marks10, Marks12, Parents,
    RecommendationInfoResponse, CreatedResponse
)

router = APIRouter(prefix="/students", tags=["Students"])

# Mounted without the /api prefix
root_router = APIRouter(tags=["Students"])

_bool_adapter = TypeAdapter(bool)


def _decode_json_field(name: str, raw: Optional[str], model: Type[BaseModel]) -> BaseModel:
    """Multipart forms carry nested objects as JSON text."""
    if not raw:
        raise ValidationError(f"{name} is required")
    try:
        return model.model_validate_json(raw)
    except SchemaError:
        raise ValidationError(f"{name} must be a valid JSON object")


def _decode_json_bool(name: str, raw: Optional[str]) -> bool:
    if not raw:
        return False
    try:
        return _bool_adapter.validate_json(raw)
    except SchemaError:
        raise ValidationError(f"{name} must be true or false")


@router.post("/submitDetails", response_model=CreatedResponse, status_code=201)
async def submit_details(
    email: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    pin_code: Optional[str] = Form(None, alias="pinCode"),
    marks10: Optional[str] = Form(None),
    is_12th_completed: Optional[str] = Form(None, alias="is12thCompleted"),
    marks12: Optional[str] = Form(None),
    parents: Optional[str] = Form(None),
    interests: Optional[str] = Form(None),
    hobbies: Optional[str] = Form(None),
    field_of_interest: Optional[str] = Form(None, alias="fieldOfInterest"),
    photo: Optional[UploadFile] = File(None),
    mark_sheet: Optional[UploadFile] = File(None, alias="markSheet"),
    students: StudentProfileService = Depends(get_student_service),
    blob_store: BlobStore = Depends(get_blob_store)
):
    """
    Save a student's profile.

    marks10, marks12 and parents are JSON objects, is12thCompleted a JSON
    boolean. Everything is decoded before any file is written, so a bad
    field leaves nothing behind. Files are capped at 5MB.
    """
    if not email:
        raise ValidationError("Email is required")

    decoded = {
        "marks10": _decode_json_field("marks10", marks10, Marks10),
        "is12thCompleted": _decode_json_bool("is12thCompleted", is_12th_completed),
        "marks12": _decode_json_field("marks12", marks12, Marks12),
        "parents": _decode_json_field("parents", parents, Parents),
    }

    photo_ref = None
    if photo is not None and photo.filename:
        photo_ref = f"/uploads/{await blob_store.save(photo)}"
    mark_sheet_ref = None
    if mark_sheet is not None and mark_sheet.filename:
        mark_sheet_ref = f"/uploads/{await blob_store.save(mark_sheet)}"

    profile = StudentProfileCreate(
        email=email,
        location=location,
        pin_code=pin_code,
        interests=interests,
        hobbies=hobbies,
        field_of_interest=field_of_interest,
        photo=photo_ref,
        mark_sheet=mark_sheet_ref,
        **decoded
    )
    student_id = students.create(profile)
    return CreatedResponse(message="Student details saved successfully", id=student_id)


@router.get("/byEmail")
async def get_by_email(
    email: Optional[str] = Query(None),
    students: StudentProfileService = Depends(get_student_service)
):
    """Full stored profile, nested family fields included."""
    if not email:
        raise ValidationError("Email is required")
    return students.get_by_email(email)


@router.get("/recommendationInfo", response_model=RecommendationInfoResponse)
async def get_recommendation_info(
    email: Optional[str] = Query(None),
    students: StudentProfileService = Depends(get_student_service)
):
    if not email:
        raise ValidationError("Email is required")
    return students.get_recommendation_info(email)


@root_router.get("/students")
async def list_students(students: StudentProfileService = Depends(get_student_service)):
    """All profiles, unpaginated."""
    return students.list_all()
