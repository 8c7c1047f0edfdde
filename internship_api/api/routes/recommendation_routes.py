"""
Recommendation Routes

POST /recommendation - LLM-written internship suggestions for a student
POST /recommendations - Static keyword match against the internship catalog
POST /skills/analyze - Key phrases and entities from free text
"""

from fastapi import APIRouter, Depends

from internship_api.core.errors import ValidationError
from internship_api.schemas.schemas import (
    LLMRecommendationRequest, LLMRecommendationResponse,
    KeywordRecommendationRequest, KeywordRecommendationResponse,
    SkillAnalysisRequest, SkillAnalysisResponse
)
from internship_api.services.keyword_recommender import KeywordRecommender, get_keyword_recommender
from internship_api.services.language_service import SkillAnalysisService, get_skill_analysis_service
from internship_api.services.llm_client import RecommendationClient, get_recommendation_client

router = APIRouter(tags=["Recommendations"])


@router.post("/recommendation", response_model=LLMRecommendationResponse)
async def llm_recommendation(
    data: LLMRecommendationRequest,
    client: RecommendationClient = Depends(get_recommendation_client)
):
    """
    Ask the language model for three internships.

    The generated text is returned verbatim.
    """
    if not data.skills:
        raise ValidationError("Skills are required")
    text = await client.recommend(data.student_name or "", data.skills)
    return LLMRecommendationResponse(recommendations=text)


@router.post("/recommendations", response_model=KeywordRecommendationResponse)
async def keyword_recommendations(
    data: KeywordRecommendationRequest,
    recommender: KeywordRecommender = Depends(get_keyword_recommender)
):
    """Match comma-separated skills against catalog roles (case-insensitive substring)."""
    if not data.skills:
        raise ValidationError("Skills are required")
    return KeywordRecommendationResponse(recommendations=recommender.recommend(data.skills))


@router.post("/skills/analyze", response_model=SkillAnalysisResponse)
async def analyze_skills(
    data: SkillAnalysisRequest,
    service: SkillAnalysisService = Depends(get_skill_analysis_service)
):
    if not data.text or not data.text.strip():
        raise ValidationError("Text is required")
    return await service.analyze(data.text)
