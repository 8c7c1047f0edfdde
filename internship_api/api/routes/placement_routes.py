"""
Placement Routes

GET /placements - List placements with student names
GET /placements/{placement_id} - Get one placement
POST /placements - Add placement (Role optional)
PUT /placements/{placement_id} - Update any subset of fields
DELETE /placements/{placement_id} - Delete placement
"""

from fastapi import APIRouter, Depends
from typing import List

from internship_api.db.postgres import EngineSource, get_engine_source
from internship_api.db.records import (
    PLACEMENTS, delete_record, get_record, insert_record, list_records, update_record
)
from internship_api.schemas.schemas import (
    PlacementCreate, PlacementUpdate, PlacementResponse, PlacementCreatedResponse,
    MessageResponse
)

router = APIRouter(prefix="/placements", tags=["Placements"])


@router.get("", response_model=List[PlacementResponse])
async def list_placements(acquire: EngineSource = Depends(get_engine_source)):
    return await list_records(acquire, PLACEMENTS)


@router.get("/{placement_id}", response_model=PlacementResponse)
async def get_placement(placement_id: str, acquire: EngineSource = Depends(get_engine_source)):
    return await get_record(acquire, PLACEMENTS, placement_id)


@router.post("", response_model=PlacementCreatedResponse, status_code=201)
async def add_placement(data: PlacementCreate, acquire: EngineSource = Depends(get_engine_source)):
    """Add placement. Role defaults to an empty string when omitted."""
    new_id = await insert_record(acquire, PLACEMENTS, data.model_dump())
    return PlacementCreatedResponse(message="Placement added successfully", placement_id=new_id)


@router.put("/{placement_id}", response_model=MessageResponse)
async def update_placement(
    placement_id: str,
    data: PlacementUpdate,
    acquire: EngineSource = Depends(get_engine_source)
):
    """Update placement. An omitted Role is left unchanged."""
    await update_record(acquire, PLACEMENTS, placement_id, data.model_dump(exclude_unset=True))
    return MessageResponse(message="Placement updated successfully")


@router.delete("/{placement_id}", response_model=MessageResponse)
async def delete_placement(placement_id: str, acquire: EngineSource = Depends(get_engine_source)):
    await delete_record(acquire, PLACEMENTS, placement_id)
    return MessageResponse(message="Placement deleted successfully")
