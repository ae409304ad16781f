"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.

Python attributes are snake_case; the wire format (and the stored
MongoDB documents) use the camelCase names the frontend sends, so every
model serialises by alias.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime
from enum import Enum


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True
    )


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    admin = "admin"
    student = "student"


# ============================================================
# AUTH SCHEMAS
# ============================================================

class RegisterRequest(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)
    user_type: UserRole

class LoginRequest(CamelModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class LoginResponse(CamelModel):
    token: str
    user_type: str
    name: str


# ============================================================
# STUDENT PROFILE SCHEMAS
# ============================================================

class Marks10(CamelModel):
    math: Optional[str] = None
    english: Optional[str] = None
    science: Optional[str] = None

class Marks12(CamelModel):
    biology: Optional[str] = None
    math: Optional[str] = None
    physics: Optional[str] = None
    chemistry: Optional[str] = None

class Parents(CamelModel):
    father_name: Optional[str] = None
    mother_name: Optional[str] = None
    father_occupation: Optional[str] = None
    mother_occupation: Optional[str] = None
    father_salary: Optional[str] = None
    mother_salary: Optional[str] = None

class StudentProfileCreate(CamelModel):
    email: str = Field(..., min_length=1)
    location: Optional[str] = None
    pin_code: Optional[str] = None
    marks10: Marks10
    is_12th_completed: bool = Field(False, alias="is12thCompleted")
    marks12: Marks12
    parents: Parents
    interests: Optional[str] = None
    hobbies: Optional[str] = None
    field_of_interest: Optional[str] = None
    photo: Optional[str] = None
    mark_sheet: Optional[str] = None

class RecommendationInfoResponse(CamelModel):
    email: str
    location: Optional[str] = None
    father_salary: Optional[str] = None
    mother_salary: Optional[str] = None


# ============================================================
# COLLEGE ADMIN SCHEMAS
# ============================================================

class CollegeAdminCreate(CamelModel):
    email: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    pincode: str = Field(..., min_length=1)
    university_affiliation: str = Field(..., min_length=1)
    naac_cert_photo: str = Field(..., min_length=1)
    website: str = Field(..., min_length=1)
    no_of_branches: int = Field(..., ge=1)
    branches: List[str] = Field(..., min_length=1)

class CollegeAdminRecord(CollegeAdminCreate):
    """A pending request as listed, sent back for approval."""
    id: str = Field(..., alias="_id")

class DisapproveRequest(CamelModel):
    id: str = Field(..., min_length=1)


# ============================================================
# PLACEMENT SCHEMAS
# ============================================================

class PlacementSummary(CamelModel):
    id: str = Field(..., alias="_id")
    college_name: str
    year: int
    data: List[dict] = []

class ApprovedPlacementData(CamelModel):
    college_name: str
    year: int
    data: List[dict] = []


# ============================================================
# TRANSACTION SCHEMAS
# ============================================================

class TransactionCreate(CamelModel):
    email: str = Field(..., min_length=1)
    order_id: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0)

class PaymentStatusUpdate(CamelModel):
    order_id: str = Field(..., min_length=1)
    status: str = Field(..., min_length=1)

class TransactionResponse(CamelModel):
    id: str = Field(..., alias="_id")
    email: Optional[str] = None
    order_id: str
    amount: Optional[float] = None
    status: str
    timestamp: Optional[datetime] = None


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True

class CreatedResponse(MessageResponse):
    id: str

class StatusMessageResponse(BaseModel):
    status: str = "ok"
    message: str

class CollegeDataResponse(CamelModel):
    message: str
    college_id: str

class HealthResponse(BaseModel):
    status: str
    mongodb: str
