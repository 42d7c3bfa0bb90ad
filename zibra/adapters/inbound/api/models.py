"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field

from ....core.domain import ROLES

MAX_QUERY_LENGTH = 1000


class SupportRequest(BaseModel):
    """Request model for a support assistant question."""

    query: str = Field(
        ...,
        description=f"The user's free-text question (at most {MAX_QUERY_LENGTH} characters)",
        json_schema_extra={"example": "how do I top up my wallet"},
    )
    role: str = Field(
        ...,
        pattern=f"^({'|'.join(ROLES)})$",
        description="Role of the user asking",
    )
    context: str | None = Field(None, description="Screen or conversation hint")
    language: str | None = Field(None, description="Preferred language from the user's profile")


class SupportResponse(BaseModel):
    """Response model for a selected support template."""

    template_id: str | None = Field(None, description="Id of the selected template")
    category: str | None = Field(None, description="Category of the selected template")
    response: str = Field(..., description="Response text to show the user")
    matched: bool = Field(..., description="False when the catch-all or default text was used")
    language: str = Field(..., description="Language the response is given in")
    notice: str | None = Field(
        None, description="Shown when the requested language is not available"
    )


class ArticleResult(BaseModel):
    """A ranked help article."""

    id: str
    title: str
    summary: str
    category: str
    score: float = Field(..., ge=0, description="Relevance score; 0 for fallback results")


class ArticleDetail(ArticleResult):
    body: str


class HelpSearchResponse(BaseModel):
    """Response model for help search."""

    query: str
    results: list[ArticleResult] = Field(default_factory=list)
    fallback: bool = Field(
        False, description="True when nothing matched and default articles are shown"
    )


class CategoryInfo(BaseModel):
    id: str
    name: str
    description: str = ""
    icon: str = ""


class CategoryArticles(BaseModel):
    category: CategoryInfo
    articles: list[ArticleResult]


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    corpus: str = Field(..., description="Corpus status")


class ErrorDetail(BaseModel):
    """Structured error detail information."""

    type: str = Field(..., description="Exception type name")
    code: str = Field(..., description="Error code (e.g., ZB_CRP_002)")
    message: str = Field(..., description="Human-readable error message")


class ErrorLocation(BaseModel):
    """Source location where error occurred."""

    model_config = ConfigDict(populate_by_name=True)

    class_name: str = Field(..., alias="class", description="Class name or <module>")
    method: str = Field(..., description="Method/function name")
    file: str = Field(..., description="Source file name")
    line: int = Field(..., description="Line number")
    timestamp: str | None = Field(None, description="When the error occurred")


class ErrorResponse(BaseModel):
    """Response model for structured errors."""

    error: ErrorDetail
    location: ErrorLocation | None = None
    context: dict | None = None
    cause: dict | None = None
    stack_trace: list[str] | None = Field(None, description="Stack trace (debug mode only)")
