"""
College Admin Routes

POST /collegeAdminData - Submit a college-admin request (pending)
GET /collegeAdmins - List pending requests
POST /approveCollegeAdmin - Move a pending request to the approved collection
POST /disapproveCollegeAdmin - Delete a pending request
POST /colleges - Store free-form college data for recommendations
"""

from typing import Any, Dict
from fastapi import APIRouter, Body, Depends
from fastapi.responses import PlainTextResponse

from app.api.deps import get_college_admin_service, get_college_data_service
from app.services.mongo_service import CollegeAdminService, CollegeDataService
from app.schemas.schemas import (
    CollegeAdminCreate, CollegeAdminRecord, DisapproveRequest,
    StatusMessageResponse, CollegeDataResponse
)

router = APIRouter(tags=["College Admins"])


@router.post("/collegeAdminData", response_model=StatusMessageResponse, status_code=201)
async def submit_college_admin(
    request: CollegeAdminCreate,
    admins: CollegeAdminService = Depends(get_college_admin_service)
):
    """All fields are required, including a non-empty branch list."""
    admins.submit(request)
    return StatusMessageResponse(message="College Admin data saved successfully")


@router.get("/collegeAdmins")
async def list_college_admins(admins: CollegeAdminService = Depends(get_college_admin_service)):
    return admins.list_pending()


@router.post("/approveCollegeAdmin", response_class=PlainTextResponse)
async def approve_college_admin(
    record: CollegeAdminRecord,
    admins: CollegeAdminService = Depends(get_college_admin_service)
):
    """
    Approve a pending request.

    The body is the record as returned by GET /collegeAdmins (with its _id).
    It is copied to the approved collection first, then removed from pending.
    """
    admins.approve(record)
    return "College Admin approved"


@router.post("/disapproveCollegeAdmin", response_class=PlainTextResponse)
async def disapprove_college_admin(
    request: DisapproveRequest,
    admins: CollegeAdminService = Depends(get_college_admin_service)
):
    """Deletes the pending request. No trace is kept."""
    admins.disapprove(request.id)
    return "College Admin disapproved"


@router.post("/colleges", response_model=CollegeDataResponse, status_code=201)
async def add_college_data(
    data: Dict[str, Any] = Body(...),
    colleges: CollegeDataService = Depends(get_college_data_service)
):
    college_id = colleges.insert(data)
    return CollegeDataResponse(message="College data added successfully", college_id=college_id)
