"""
Placement Routes

POST /api/upload - Upload a placement CSV with collegeName + year (pending)
GET /api/get-placement-data - Pending uploads with their CSV rows
POST /api/approve-placement/{id} - Approve an upload
DELETE /api/reject-placement/{id} - Reject (delete) an upload
GET /api/get-approved-placement-data - Approved rows for a college and year
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile

from app.api.deps import get_placement_service
from app.services.placement_service import PlacementService
from app.schemas.schemas import CreatedResponse, MessageResponse, PlacementSummary, ApprovedPlacementData

router = APIRouter(tags=["Placements"])


@router.post("/upload", response_model=CreatedResponse, status_code=201)
async def upload_placement_data(
    college_name: Optional[str] = Form(None, alias="collegeName"),
    year: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    placements: PlacementService = Depends(get_placement_service)
):
    """
    Upload placement statistics.

    The file keeps its original name behind a unique prefix, so two uploads
    called stats.csv do not overwrite each other.
    """
    placement_id = await placements.upload(college_name, year, file)
    return CreatedResponse(message="Data uploaded successfully", id=placement_id)


@router.get("/get-placement-data", response_model=List[PlacementSummary])
async def get_placement_data(placements: PlacementService = Depends(get_placement_service)):
    """Pending uploads. Records whose file is missing are skipped."""
    return placements.list_pending()


@router.post("/approve-placement/{placement_id}")
async def approve_placement(
    placement_id: str,
    placements: PlacementService = Depends(get_placement_service)
):
    updated = placements.approve(placement_id)
    return {"message": "Placement approved successfully", "updatedPlacement": updated}


@router.delete("/reject-placement/{placement_id}", response_model=MessageResponse)
async def reject_placement(
    placement_id: str,
    placements: PlacementService = Depends(get_placement_service)
):
    placements.reject(placement_id)
    return MessageResponse(message="Placement rejected successfully")


@router.get("/get-approved-placement-data", response_model=List[ApprovedPlacementData])
async def get_approved_placement_data(
    college_name: Optional[str] = Query(None, alias="collegeName"),
    year: Optional[str] = Query(None),
    placements: PlacementService = Depends(get_placement_service)
):
    return placements.query_approved(college_name, year)
