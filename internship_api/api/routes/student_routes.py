"""
Student Routes

GET /students - List students
GET /students/{student_id} - Get one student
POST /students - Create student
PUT /students/{student_id} - Update any subset of fields
DELETE /students/{student_id} - Delete student
"""

from fastapi import APIRouter, Depends
from typing import List

from internship_api.db.postgres import EngineSource, get_engine_source
from internship_api.db.records import (
    STUDENTS, create_student, delete_record, get_record, list_records, update_record
)
from internship_api.schemas.schemas import (
    StudentCreate, StudentUpdate, StudentResponse, StudentCreatedResponse, MessageResponse
)

router = APIRouter(prefix="/students", tags=["Students"])


@router.get("", response_model=List[StudentResponse])
async def list_students(acquire: EngineSource = Depends(get_engine_source)):
    return await list_records(acquire, STUDENTS)


@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(student_id: str, acquire: EngineSource = Depends(get_engine_source)):
    return await get_record(acquire, STUDENTS, student_id)


@router.post("", response_model=StudentCreatedResponse, status_code=201)
async def add_student(data: StudentCreate, acquire: EngineSource = Depends(get_engine_source)):
    """Create a student. RollNumber, FirstName, LastName and Email are required."""
    new_id = await create_student(acquire, data.model_dump())
    return StudentCreatedResponse(message="Student added", student_id=new_id)


@router.put("/{student_id}", response_model=MessageResponse)
async def update_student(student_id: str, data: StudentUpdate, acquire: EngineSource = Depends(get_engine_source)):
    """Update student. Only provided fields are updated."""
    await update_record(acquire, STUDENTS, student_id, data.model_dump(exclude_unset=True))
    return MessageResponse(message="Student updated")


@router.delete("/{student_id}", response_model=MessageResponse)
async def delete_student(student_id: str, acquire: EngineSource = Depends(get_engine_source)):
    await delete_record(acquire, STUDENTS, student_id)
    return MessageResponse(message="Student deleted")
