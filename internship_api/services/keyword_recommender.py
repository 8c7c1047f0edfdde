"""
Keyword Recommender - static internship matching without AI.

A skill matches a listing when it appears (case-insensitively) inside the
listing's role. The catalog is an immutable table handed in at construction.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import List, Sequence, Tuple

NO_MATCH = "No match found"


@dataclass(frozen=True)
class InternshipListing:
    company: str
    role: str

    @property
    def label(self) -> str:
        return f"{self.company} - {self.role}"


DEFAULT_CATALOG: Tuple[InternshipListing, ...] = (
    InternshipListing("Google", "ML Intern"),
    InternshipListing("Microsoft", "Cloud Intern"),
    InternshipListing("Amazon", "Web Dev Intern"),
    InternshipListing("Facebook", "Data Science Intern"),
    InternshipListing("Tesla", "AI Intern"),
)


def parse_skills(skills: str) -> List[str]:
    """Split a comma-separated skill list; blank entries are dropped."""
    return [s.strip() for s in skills.lower().split(",") if s.strip()]


class KeywordRecommender:

    def __init__(self, catalog: Sequence[InternshipListing] = DEFAULT_CATALOG):
        self.catalog = tuple(catalog)

    def recommend(self, skills: str) -> List[str]:
        skill_list = parse_skills(skills)
        matches = [
            listing.label for listing in self.catalog
            if any(skill in listing.role.lower() for skill in skill_list)
        ]
        return matches or [NO_MATCH]


@lru_cache()
def get_keyword_recommender() -> KeywordRecommender:
    return KeywordRecommender(DEFAULT_CATALOG)
