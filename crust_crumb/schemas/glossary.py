from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

Difficulty = Literal["Beginner", "Intermediate", "Advanced"]


class _DatasetModel(BaseModel):
    # dataset keys are camelCase, attributes are snake_case
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class TroubleshootingItem(_DatasetModel):
    problem: str
    solution: str


class AffiliateTool(_DatasetModel):
    name: str
    link: str


class GlossaryTerm(_DatasetModel):
    id: str
    term: str = Field(min_length=1)
    pronunciation: Optional[str] = None
    definition: str
    short_definition: Optional[str] = None
    category: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    sources: Tuple[str, ...] = ()
    related_term_ids: Tuple[str, ...] = ()
    henrys_tips: Tuple[str, ...] = ()
    common_mistakes: Tuple[str, ...] = ()
    troubleshooting: Tuple[TroubleshootingItem, ...] = ()
    alternate_questions: Tuple[str, ...] = ()
    history: Optional[str] = None
    media_placeholder: Tuple[str, ...] = ()
    youtube_query: Optional[str] = None
    book_ref: Optional[str] = None
    book_chapter: Optional[str] = None
    difficulty_explanation: Optional[str] = None
    affiliate_tools: Tuple[AffiliateTool, ...] = ()
    widgets: Tuple[str, ...] = ()

    @field_validator(
        "sources",
        "related_term_ids",
        "henrys_tips",
        "common_mistakes",
        "troubleshooting",
        "alternate_questions",
        "media_placeholder",
        "affiliate_tools",
        "widgets",
        mode="before",
    )
    @classmethod
    def _null_sequence_is_empty(cls, value):
        return () if value is None else value
