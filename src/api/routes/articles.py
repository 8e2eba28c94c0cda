from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api.error import ClientError, ServerError
from src.app.repositories.article_repository import IArticleRepository
from src.app.use_cases.articles import (
    ArticleDetailResponse,
    GetQuizArticleUseCase,
    ListQuizArticlesUseCase,
)
from src.depends import get_article_repository

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get("", status_code=status.HTTP_200_OK)
async def list_articles(articles: IArticleRepository = Depends(get_article_repository)):
    """
    Quiz Articles

    Front matter (plus id) of every article that carries a quiz.
    Responds 500 with an empty list when the article store is unreadable.
    """
    result = await ListQuizArticlesUseCase(articles).execute()
    if result.is_err():
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=[])
    return result.value


@router.get("/{article_id}", status_code=status.HTTP_200_OK, response_model=ArticleDetailResponse)
async def get_article(
    article_id: str,
    articles: IArticleRepository = Depends(get_article_repository),
):
    result = await GetQuizArticleUseCase(articles).execute(article_id)
    if result.is_err():
        error = result.error
        if error.code == "ARTICLE_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)
    return result.value
