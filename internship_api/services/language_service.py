"""
Skill Analysis Service - key phrases and entities via Azure AI Language.

The language service is a black box: we send one document and read back
its key phrases and recognized entities.
"""

import logging
from functools import lru_cache
from typing import Callable, Dict, List, Optional

from azure.ai.textanalytics.aio import TextAnalyticsClient
from azure.core.credentials import AzureKeyCredential
from azure.core.exceptions import AzureError

from internship_api.core.config import get_settings
from internship_api.core.errors import Misconfigured, OracleFailure

logger = logging.getLogger(__name__)


def _default_client(endpoint: str, key: str) -> TextAnalyticsClient:
    return TextAnalyticsClient(endpoint=endpoint, credential=AzureKeyCredential(key))


class SkillAnalysisService:
    """Wrapper around the Text Analytics client for single-document calls."""

    def __init__(
        self,
        endpoint: Optional[str],
        key: Optional[str],
        client_factory: Callable[[str, str], TextAnalyticsClient] = _default_client
    ):
        self.endpoint = endpoint
        self.key = key
        self._client_factory = client_factory

    def _client(self) -> TextAnalyticsClient:
        if not self.endpoint or not self.key:
            raise Misconfigured("Azure Language endpoint or key not configured")
        return self._client_factory(self.endpoint, self.key)

    async def extract_key_phrases(self, text: str) -> List[str]:
        async with self._client() as client:
            try:
                results = await client.extract_key_phrases([text])
            except AzureError as e:
                logger.error("Key phrase extraction failed: %s", e)
                raise OracleFailure(str(e)) from e
        document = results[0] if results else None
        if document is None or document.is_error:
            return []
        return list(document.key_phrases)

    async def recognize_entities(self, text: str) -> List[Dict[str, str]]:
        async with self._client() as client:
            try:
                results = await client.recognize_entities([text])
            except AzureError as e:
                logger.error("Entity recognition failed: %s", e)
                raise OracleFailure(str(e)) from e
        document = results[0] if results else None
        if document is None or document.is_error:
            return []
        return [{"text": entity.text, "category": entity.category} for entity in document.entities]

    async def analyze(self, text: str) -> dict:
        """Key phrases and entities for one piece of free text."""
        return {
            "key_phrases": await self.extract_key_phrases(text),
            "entities": await self.recognize_entities(text)
        }


@lru_cache()
def get_skill_analysis_service() -> SkillAnalysisService:
    """Get skill analysis service instance (singleton)."""
    settings = get_settings()
    return SkillAnalysisService(settings.azure_language_endpoint, settings.azure_language_key)
