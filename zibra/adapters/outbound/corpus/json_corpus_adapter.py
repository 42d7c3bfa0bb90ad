"""Loads the static corpus configuration from JSON files."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ....core.domain import (
    DEFAULT_PRIORITY,
    Corpus,
    HelpArticle,
    HelpCategory,
    ResponseTemplate,
    SynonymTable,
)
from ....core.domain.exceptions import CorpusLoadError, MissingCatchAllError
from ....core.ports.corpus_source_port import CorpusSourcePort

logger = logging.getLogger(__name__)


class TemplateRecord(BaseModel):
    """A response template as written in ``templates.json``."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    role: str | list[str]
    category: str
    keywords: list[str] = Field(default_factory=list)
    response: str
    priority: int | None = None


class ArticleRecord(BaseModel):
    """A help article as written in ``driver_help.json``."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: str = Field(..., min_length=1)
    category_id: str = Field(..., alias="categoryId")
    title: str
    summary: str
    content: str
    keywords: list[str] = Field(default_factory=list)


class CategoryRecord(BaseModel):
    """A help category as written in ``driver_help.json``."""

    id: str
    name: str
    description: str = ""
    icon: str = ""


class HelpFileRecord(BaseModel):
    categories: list[CategoryRecord] = Field(default_factory=list)
    articles: list[ArticleRecord] = Field(default_factory=list)


_templates_adapter = TypeAdapter(list[TemplateRecord])
_synonyms_adapter = TypeAdapter(dict[str, list[str]])


class JsonCorpusAdapter(CorpusSourcePort):
    """Reads templates, help articles and synonyms from a directory of JSON files."""

    def __init__(
        self,
        templates_path: Path,
        help_articles_path: Path,
        synonyms_path: Path,
        default_priority: int = DEFAULT_PRIORITY,
        require_catch_all: bool = False,
    ) -> None:
        self.templates_path = Path(templates_path)
        self.help_articles_path = Path(help_articles_path)
        self.synonyms_path = Path(synonyms_path)
        self.default_priority = default_priority
        self.require_catch_all = require_catch_all
        self._help_file: HelpFileRecord | None = None

    @classmethod
    def from_directory(cls, directory: Path, **kwargs: Any) -> "JsonCorpusAdapter":
        """Build an adapter for the default file names inside ``directory``."""
        directory = Path(directory)
        return cls(
            templates_path=directory / "templates.json",
            help_articles_path=directory / "driver_help.json",
            synonyms_path=directory / "synonyms.json",
            **kwargs,
        )

    def _read_json(self, path: Path) -> Any:
        try:
            text = path.read_text(encoding="utf-8-sig")
        except OSError as e:
            raise CorpusLoadError(
                f"Cannot read corpus file {path.name}", cause=e, context={"path": str(path)}
            )
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise CorpusLoadError(
                f"Corpus file {path.name} is not valid JSON",
                cause=e,
                context={"path": str(path), "line": e.lineno},
            )

    def _validate(self, adapter_or_model: Any, raw: Any, path: Path) -> Any:
        try:
            if isinstance(adapter_or_model, TypeAdapter):
                return adapter_or_model.validate_python(raw)
            return adapter_or_model.model_validate(raw)
        except PydanticValidationError as e:
            raise CorpusLoadError(
                f"Corpus file {path.name} has invalid entries",
                cause=e,
                context={"path": str(path), "errors": e.error_count()},
            )

    def load_templates(self) -> Corpus[ResponseTemplate]:
        records = self._validate(
            _templates_adapter, self._read_json(self.templates_path), self.templates_path
        )
        corpus = Corpus(
            ResponseTemplate(
                id=record.id,
                scope=record.role,
                category=record.category,
                keywords=record.keywords,
                content=record.response,
                priority=(
                    record.priority if record.priority is not None else self.default_priority
                ),
            )
            for record in records
        )
        if self.require_catch_all and corpus.catch_all is None:
            raise MissingCatchAllError(
                "Template corpus has no catch-all template (empty keywords)",
                context={"path": str(self.templates_path)},
            )
        logger.info("Loaded %d response templates from %s", len(corpus), self.templates_path)
        return corpus

    def _load_help_file(self) -> HelpFileRecord:
        if self._help_file is None:
            self._help_file = self._validate(
                HelpFileRecord,
                self._read_json(self.help_articles_path),
                self.help_articles_path,
            )
        return self._help_file

    def load_help_articles(self) -> Corpus[HelpArticle]:
        help_file = self._load_help_file()
        corpus = Corpus(
            HelpArticle(
                id=record.id,
                category=record.category_id,
                title=record.title,
                summary=record.summary,
                body=record.content,
                keywords=record.keywords,
                priority=self.default_priority,
            )
            for record in help_file.articles
        )
        logger.info("Loaded %d help articles from %s", len(corpus), self.help_articles_path)
        return corpus

    def load_help_categories(self) -> list[HelpCategory]:
        return [
            HelpCategory(id=c.id, name=c.name, description=c.description, icon=c.icon)
            for c in self._load_help_file().categories
        ]

    def load_synonyms(self) -> SynonymTable:
        raw = self._validate(
            _synonyms_adapter, self._read_json(self.synonyms_path), self.synonyms_path
        )
        table = SynonymTable(raw)
        logger.info("Loaded %d synonym entries from %s", len(table), self.synonyms_path)
        return table
