"""
Internship Routes

GET /internships - List internships with student names
GET /internships/{internship_id} - Get one internship
POST /internships - Add internship
PUT /internships/{internship_id} - Update any subset of fields
DELETE /internships/{internship_id} - Delete internship
"""

from fastapi import APIRouter, Depends
from typing import List

from internship_api.db.postgres import EngineSource, get_engine_source
from internship_api.db.records import (
    INTERNSHIPS, delete_record, get_record, insert_record, list_records, update_record
)
from internship_api.schemas.schemas import (
    InternshipCreate, InternshipUpdate, InternshipResponse, InternshipCreatedResponse,
    MessageResponse
)

router = APIRouter(prefix="/internships", tags=["Internships"])


@router.get("", response_model=List[InternshipResponse])
async def list_internships(acquire: EngineSource = Depends(get_engine_source)):
    return await list_records(acquire, INTERNSHIPS)


@router.get("/{internship_id}", response_model=InternshipResponse)
async def get_internship(internship_id: str, acquire: EngineSource = Depends(get_engine_source)):
    return await get_record(acquire, INTERNSHIPS, internship_id)


@router.post("", response_model=InternshipCreatedResponse, status_code=201)
async def add_internship(data: InternshipCreate, acquire: EngineSource = Depends(get_engine_source)):
    """Add internship. All of StudentID, Company, Role, StartDate, EndDate are required."""
    new_id = await insert_record(acquire, INTERNSHIPS, data.model_dump())
    return InternshipCreatedResponse(message="Internship added successfully", internship_id=new_id)


@router.put("/{internship_id}", response_model=MessageResponse)
async def update_internship(
    internship_id: str,
    data: InternshipUpdate,
    acquire: EngineSource = Depends(get_engine_source)
):
    await update_record(acquire, INTERNSHIPS, internship_id, data.model_dump(exclude_unset=True))
    return MessageResponse(message="Internship updated successfully")


@router.delete("/{internship_id}", response_model=MessageResponse)
async def delete_internship(internship_id: str, acquire: EngineSource = Depends(get_engine_source)):
    await delete_record(acquire, INTERNSHIPS, internship_id)
    return MessageResponse(message="Internship deleted successfully")
