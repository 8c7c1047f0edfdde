import asyncio
from types import SimpleNamespace

import pytest
from openai import OpenAIError

from internship_api.core.errors import Misconfigured, OracleFailure
from internship_api.main import app
from internship_api.services.keyword_recommender import (
    InternshipListing,
    KeywordRecommender,
    parse_skills,
)
from internship_api.services.llm_client import RecommendationClient, get_recommendation_client


# ============================================================
# KEYWORD RECOMMENDER
# ============================================================

def test_keyword_route_matches_catalog_roles(client):
    response = client.post("/api/recommendations", json={"skills": "ml, cloud"})

    assert response.status_code == 200
    assert response.json() == {"recommendations": ["Google - ML Intern", "Microsoft - Cloud Intern"]}


def test_keyword_route_requires_skills(client):
    response = client.post("/api/recommendations", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "Skills are required"}


def test_no_match():
    assert KeywordRecommender().recommend("cooking") == ["No match found"]


def test_matching_is_case_insensitive_substring():
    assert KeywordRecommender().recommend("  DATA ") == ["Facebook - Data Science Intern"]


def test_blank_entries_do_not_match_everything():
    assert parse_skills("ai, ,") == ["ai"]
    assert KeywordRecommender().recommend("ai,") == ["Tesla - AI Intern"]


def test_catalog_is_injected():
    recommender = KeywordRecommender([InternshipListing("Zoho", "Rust Intern")])

    assert recommender.recommend("rust") == ["Zoho - Rust Intern"]
    assert isinstance(recommender.catalog, tuple)


# ============================================================
# LLM RECOMMENDATION
# ============================================================

class FakeCompletions:
    def __init__(self, reply=None, error=None, empty=False):
        self.reply = reply
        self.error = error
        self.empty = empty
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        if self.empty:
            return SimpleNamespace(choices=[])
        message = SimpleNamespace(content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_openai(completions):
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


def test_llm_prompt_names_student_and_skills():
    completions = FakeCompletions(reply="1. Data Intern at X")
    client = RecommendationClient(api_key=None, model="gpt-35-turbo", client=fake_openai(completions))

    text = asyncio.run(client.recommend("Asha", "python, sql"))

    assert text == "1. Data Intern at X"
    call = completions.calls[0]
    assert call["model"] == "gpt-35-turbo"
    assert call["messages"][0] == {"role": "system", "content": "You are an internship recommendation assistant."}
    assert call["messages"][1]["content"] == "Suggest 3 internships for student Asha with skills: python, sql"


def test_llm_error_is_an_oracle_failure():
    completions = FakeCompletions(error=OpenAIError("rate limited"))
    client = RecommendationClient(api_key=None, model="gpt-35-turbo", client=fake_openai(completions))

    with pytest.raises(OracleFailure) as exc_info:
        asyncio.run(client.recommend("Asha", "python"))
    assert "rate limited" in exc_info.value.message


def test_llm_without_key_is_misconfigured():
    client = RecommendationClient(api_key=None, model="gpt-35-turbo")

    with pytest.raises(Misconfigured):
        asyncio.run(client.recommend("Asha", "python"))


@pytest.fixture
def llm_completions():
    completions = FakeCompletions(reply="Try Google, Microsoft and Tesla.")
    fake_client = RecommendationClient(api_key=None, model="gpt-35-turbo", client=fake_openai(completions))
    app.dependency_overrides[get_recommendation_client] = lambda: fake_client
    yield completions
    app.dependency_overrides.pop(get_recommendation_client, None)


def test_llm_route(client, llm_completions):
    response = client.post("/api/recommendation", json={"studentName": "Asha", "skills": "ml"})

    assert response.status_code == 200
    assert response.json() == {"recommendations": "Try Google, Microsoft and Tesla."}


def test_llm_route_failure(client, llm_completions):
    llm_completions.error = OpenAIError("service unavailable")

    response = client.post("/api/recommendation", json={"studentName": "Asha", "skills": "ml"})

    assert response.status_code == 500
    assert "service unavailable" in response.json()["error"]


def test_llm_route_empty_completion(client, llm_completions):
    llm_completions.empty = True

    response = client.post("/api/recommendation", json={"studentName": "Asha", "skills": "ml"})

    assert response.status_code == 500
    assert response.json() == {"error": "Empty response from language model"}


def test_llm_route_requires_skills(client, llm_completions):
    response = client.post("/api/recommendation", json={"studentName": "Asha"})

    assert response.status_code == 400
    assert response.json() == {"error": "Skills are required"}
    assert llm_completions.calls == []
