from .get_articles_use_case import (
    ArticleDetailResponse,
    GetQuizArticleUseCase,
    ListQuizArticlesUseCase,
)

__all__ = ["ListQuizArticlesUseCase", "GetQuizArticleUseCase", "ArticleDetailResponse"]
