"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.

Wire names are PascalCase (RollNumber, StudentID, ...); Python attributes
are snake_case and match the database columns, so model_dump() feeds the
record repositories directly.
"""

from datetime import date
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from internship_api.db.partial_update import INT4_MAX, INT4_MIN


def _wire(*names: str, **constraints):
    """Accept any of the given JSON names for a request field."""
    return Field(None, validation_alias=AliasChoices(*names), **constraints)


class ResponseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ============================================================
# STUDENT SCHEMAS
# ============================================================

class StudentCreate(BaseModel):
    # presence is checked by the repository so a missing field is a 400
    roll_number: Optional[str] = _wire("RollNumber")
    first_name: Optional[str] = _wire("FirstName")
    last_name: Optional[str] = _wire("LastName")
    email: Optional[str] = _wire("Email")
    resume_url: Optional[str] = _wire("ResumeUrl")

class StudentUpdate(BaseModel):
    roll_number: Optional[str] = _wire("RollNumber")
    first_name: Optional[str] = _wire("FirstName")
    last_name: Optional[str] = _wire("LastName")
    email: Optional[str] = _wire("Email")
    resume_url: Optional[str] = _wire("ResumeUrl")

class StudentResponse(ResponseModel):
    student_id: int = Field(..., alias="StudentID")
    roll_number: str = Field(..., alias="RollNumber")
    first_name: str = Field(..., alias="FirstName")
    last_name: str = Field(..., alias="LastName")
    email: str = Field(..., alias="Email")
    resume_url: Optional[str] = Field(None, alias="ResumeUrl")

class StudentCreatedResponse(ResponseModel):
    message: str
    student_id: int = Field(..., alias="StudentID")


# ============================================================
# INTERNSHIP SCHEMAS
# ============================================================

class InternshipCreate(BaseModel):
    student_id: Optional[int] = _wire("StudentID", "studentId", ge=INT4_MIN, le=INT4_MAX)
    company: Optional[str] = _wire("Company", "company")
    role: Optional[str] = _wire("Role", "role")
    start_date: Optional[date] = _wire("StartDate", "startDate")
    end_date: Optional[date] = _wire("EndDate", "endDate")

class InternshipUpdate(BaseModel):
    student_id: Optional[int] = _wire("StudentID", "studentId", ge=INT4_MIN, le=INT4_MAX)
    company: Optional[str] = _wire("Company", "company")
    role: Optional[str] = _wire("Role", "role")
    start_date: Optional[date] = _wire("StartDate", "startDate")
    end_date: Optional[date] = _wire("EndDate", "endDate")

class InternshipResponse(ResponseModel):
    internship_id: int = Field(..., alias="InternshipID")
    student_id: Optional[int] = Field(None, alias="StudentID")
    first_name: Optional[str] = Field(None, alias="FirstName")
    last_name: Optional[str] = Field(None, alias="LastName")
    company: str = Field(..., alias="Company")
    role: str = Field(..., alias="Role")
    start_date: date = Field(..., alias="StartDate")
    end_date: date = Field(..., alias="EndDate")

class InternshipCreatedResponse(ResponseModel):
    message: str
    internship_id: int = Field(..., alias="InternshipID")


# ============================================================
# PLACEMENT SCHEMAS
# ============================================================

class PlacementCreate(BaseModel):
    student_id: Optional[int] = _wire("StudentID", "studentId", ge=INT4_MIN, le=INT4_MAX)
    company: Optional[str] = _wire("Company", "company")
    role: Optional[str] = _wire("Role", "role")
    package: Optional[str] = _wire("Package", "package")
    placement_date: Optional[date] = _wire("PlacementDate", "placementDate", "offerDate")

class PlacementUpdate(BaseModel):
    student_id: Optional[int] = _wire("StudentID", "studentId", ge=INT4_MIN, le=INT4_MAX)
    company: Optional[str] = _wire("Company", "company")
    role: Optional[str] = _wire("Role", "role")
    package: Optional[str] = _wire("Package", "package")
    placement_date: Optional[date] = _wire("PlacementDate", "placementDate", "offerDate")

class PlacementResponse(ResponseModel):
    placement_id: int = Field(..., alias="PlacementID")
    student_id: Optional[int] = Field(None, alias="StudentID")
    first_name: Optional[str] = Field(None, alias="FirstName")
    last_name: Optional[str] = Field(None, alias="LastName")
    company: str = Field(..., alias="Company")
    role: Optional[str] = Field(None, alias="Role")
    package: str = Field(..., alias="Package")
    placement_date: date = Field(..., alias="PlacementDate")

class PlacementCreatedResponse(ResponseModel):
    message: str
    placement_id: int = Field(..., alias="PlacementID")


# ============================================================
# UPLOAD / AI SCHEMAS
# ============================================================

class UploadResponse(BaseModel):
    url: str

class LLMRecommendationRequest(BaseModel):
    student_name: Optional[str] = _wire("studentName", "StudentName")
    skills: Optional[str] = None

class LLMRecommendationResponse(BaseModel):
    recommendations: str

class KeywordRecommendationRequest(BaseModel):
    skills: Optional[str] = None

class KeywordRecommendationResponse(BaseModel):
    recommendations: List[str]

class SkillAnalysisRequest(BaseModel):
    text: Optional[str] = None

class EntityResponse(BaseModel):
    text: str
    category: str

class SkillAnalysisResponse(ResponseModel):
    key_phrases: List[str] = Field(default_factory=list, alias="keyPhrases")
    entities: List[EntityResponse] = Field(default_factory=list)


# ============================================================
# GENERIC RESPONSES
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True

class HealthResponse(BaseModel):
    status: str
    database: str
