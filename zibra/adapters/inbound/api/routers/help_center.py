"""Help center search and browse endpoints."""

from fastapi import APIRouter, HTTPException, Query

from .....core.domain import HelpArticle
from ..deps import check_query_length, get_help_search
from ..models import (
    ArticleDetail,
    ArticleResult,
    CategoryArticles,
    CategoryInfo,
    HelpSearchResponse,
)

router = APIRouter(prefix="/api/v1/help", tags=["help"])


def _article_result(article: HelpArticle, score: float = 0) -> ArticleResult:
    return ArticleResult(
        id=article.id,
        title=article.title,
        summary=article.summary,
        category=article.category,
        score=score,
    )


@router.get("/search", response_model=HelpSearchResponse)
async def search_help(
    q: str = Query("", description="Free-text search"),
) -> HelpSearchResponse:
    """Rank help articles against a query."""
    check_query_length(q)
    results = get_help_search().search_scored(q)
    return HelpSearchResponse(
        query=q,
        results=[_article_result(r.document, r.score) for r in results],
        fallback=bool(results) and all(r.score == 0 for r in results),
    )


@router.get("/categories", response_model=list[CategoryInfo])
async def list_categories() -> list[CategoryInfo]:
    return [
        CategoryInfo(id=c.id, name=c.name, description=c.description, icon=c.icon)
        for c in get_help_search().categories
    ]


@router.get("/categories/{category_id}", response_model=CategoryArticles)
async def category_articles(category_id: str) -> CategoryArticles:
    """List the articles of one help category."""
    service = get_help_search()
    category = service.get_category(category_id)
    if category is None:
        raise HTTPException(status_code=404, detail=f"Unknown help category: {category_id}")

    return CategoryArticles(
        category=CategoryInfo(
            id=category.id,
            name=category.name,
            description=category.description,
            icon=category.icon,
        ),
        articles=[_article_result(a) for a in service.articles_in_category(category_id)],
    )


@router.get("/articles/{article_id}", response_model=ArticleDetail)
async def get_article(article_id: str) -> ArticleDetail:
    article = get_help_search().articles.get(article_id)
    if article is None:
        raise HTTPException(status_code=404, detail=f"Unknown help article: {article_id}")
    return ArticleDetail(
        id=article.id,
        title=article.title,
        summary=article.summary,
        category=article.category,
        score=0,
        body=article.body,
    )
