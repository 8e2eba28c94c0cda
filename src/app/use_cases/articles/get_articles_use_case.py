"""
Article Use Cases

Quiz articles are Markdown documents whose front matter has a quiz block.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from libs.result import Error, Result, Return
from src.app.repositories.article_repository import IArticleRepository

logger = logging.getLogger(__name__)


class ArticleDetailResponse(BaseModel):
    id: str
    title: Optional[str]
    genre: Optional[str]
    quiz: Dict[str, Any]
    body: str


class ListQuizArticlesUseCase:
    """Front matter of every quiz article, with its id"""

    def __init__(self, articles: IArticleRepository):
        self.articles = articles

    async def execute(self) -> Result[List[Dict[str, Any]]]:
        try:
            articles = await self.articles.list_all()
        except OSError as e:
            logger.error(f"Failed to read articles: {e}")
            return Return.err(Error("ARTICLES_UNAVAILABLE", "Articles are unavailable"))

        return Return.ok(
            [{**a.front_matter, "id": a.id} for a in articles if a.has_quiz()]
        )


class GetQuizArticleUseCase:
    def __init__(self, articles: IArticleRepository):
        self.articles = articles

    async def execute(self, article_id: str) -> Result[ArticleDetailResponse]:
        try:
            article = await self.articles.get(article_id)
        except OSError as e:
            logger.error(f"Failed to read article {article_id}: {e}")
            return Return.err(Error("ARTICLES_UNAVAILABLE", "Articles are unavailable"))

        if article is None or not article.has_quiz():
            return Return.err(Error("ARTICLE_NOT_FOUND", "Article not found"))

        return Return.ok(
            ArticleDetailResponse(
                id=article.id,
                title=article.title,
                genre=article.genre,
                quiz=article.quiz,
                body=article.body,
            )
        )
