"""
Article value object parsed from a Markdown file with YAML front matter.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class Article(BaseModel):
    id: str
    front_matter: Dict[str, Any] = Field(default_factory=dict)
    body: str = ""

    @property
    def title(self) -> Optional[str]:
        return self.front_matter.get("title")

    @property
    def genre(self) -> Optional[str]:
        return self.front_matter.get("genre")

    @property
    def quiz(self) -> Optional[Dict[str, Any]]:
        quiz = self.front_matter.get("quiz")
        return quiz if isinstance(quiz, dict) else None

    def has_quiz(self) -> bool:
        return self.quiz is not None
