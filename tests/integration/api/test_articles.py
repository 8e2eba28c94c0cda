"""
Integration tests for quiz article endpoints
"""
import pytest
from httpx import AsyncClient

QUIZ_ARTICLE = """---
title: Planets
genre: science
quiz:
  questions:
    - question: Largest planet?
      answer: Jupiter
---
The solar system has eight planets.
"""


@pytest.fixture
def articles(articles_dir):
    (articles_dir / "planets.md").write_text(QUIZ_ARTICLE, encoding="utf-8")
    (articles_dir / "about.md").write_text("---\ntitle: About\n---\nNo quiz here.", encoding="utf-8")
    return articles_dir


@pytest.mark.asyncio
async def test_list_returns_quiz_articles_only(client: AsyncClient, articles):
    response = await client.get("/api/articles")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 1
    assert data[0]["id"] == "planets"
    assert data[0]["title"] == "Planets"
    assert data[0]["quiz"]["questions"][0]["answer"] == "Jupiter"


@pytest.mark.asyncio
async def test_get_article(client: AsyncClient, articles):
    response = await client.get("/api/articles/planets")

    assert response.status_code == 200
    data = response.json()
    assert data["genre"] == "science"
    assert data["body"].strip() == "The solar system has eight planets."


@pytest.mark.asyncio
@pytest.mark.parametrize("article_id", ["about", "missing"])
async def test_article_without_quiz_is_not_found(client: AsyncClient, articles, article_id):
    response = await client.get(f"/api/articles/{article_id}")

    assert response.status_code == 404
    assert response.json()["code"] == "ARTICLE_NOT_FOUND"


@pytest.mark.asyncio
async def test_unreadable_store_returns_empty_list(client: AsyncClient, articles_dir):
    articles_dir.rmdir()

    response = await client.get("/api/articles")

    assert response.status_code == 500
    assert response.json() == []


@pytest.mark.asyncio
async def test_article_that_is_not_utf8_is_skipped(client: AsyncClient, articles):
    (articles / "broken.md").write_bytes(b"---\ntitle: Broken\nquiz:\n  questions: []\n---\n\xff\xfe")

    list_response = await client.get("/api/articles")
    get_response = await client.get("/api/articles/broken")

    assert list_response.status_code == 200
    assert [a["id"] for a in list_response.json()] == ["planets"]
    assert get_response.status_code == 404
