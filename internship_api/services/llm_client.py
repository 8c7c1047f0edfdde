"""
LLM Recommendation Client

Uses the openai library against OpenAI or any OpenAI-compatible endpoint
(Azure OpenAI deployments, DeepSeek, ...). The model name is a deployment
name from settings.

The generated text is returned as-is; nothing is parsed or stored.
"""
import logging
from typing import Optional

from openai import AsyncOpenAI, OpenAIError

from internship_api.core.config import get_settings
from internship_api.core.errors import Misconfigured, OracleFailure

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are an internship recommendation assistant."


class RecommendationClient:
    """
    Wrapper for the chat completion call used by /recommendation.
    """

    def __init__(self, api_key: Optional[str], model: str, base_url: Optional[str] = None, client=None):
        self.model = model
        if client is None and api_key:
            client = AsyncOpenAI(api_key=api_key, base_url=base_url)
        self.client = client

    async def _call_api(self, system_prompt: str, user_content: str) -> str:
        """
        Internal method to call the chat completion API.
        Returns raw text response.
        """
        if self.client is None:
            raise Misconfigured("OpenAI API key not configured")
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_content}
                ]
            )
        except OpenAIError as e:
            logger.error("Recommendation request failed: %s", e)
            raise OracleFailure(str(e)) from e
        if not response.choices:
            logger.error("Recommendation request returned no choices")
            raise OracleFailure("Empty response from language model")
        return response.choices[0].message.content or ""

    async def recommend(self, student_name: str, skills: str) -> str:
        """Ask the model for three internships matching the student's skills."""
        prompt = f"Suggest 3 internships for student {student_name} with skills: {skills}"
        return await self._call_api(SYSTEM_PROMPT, prompt)


# Singleton instance
_recommendation_client: RecommendationClient = None


def get_recommendation_client() -> RecommendationClient:
    """Get or create the recommendation client (singleton pattern)"""
    global _recommendation_client
    if _recommendation_client is None:
        settings = get_settings()
        _recommendation_client = RecommendationClient(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url
        )
    return _recommendation_client
