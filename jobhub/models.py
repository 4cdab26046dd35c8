"""Data models for job search results and job detail records.

Records come from the JSearch API and are treated as untrusted. The
pydantic models below mirror the JSearch field names through aliases, and
``from_api`` turns any ``ValidationError`` into ``MalformedResponse``
naming the offending field, so a bad value never reaches the formatting
code. JSON ``null`` maps to the empty default of each field.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Annotated, Any, Mapping, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    NonNegativeInt,
    StrictBool,
    StrictStr,
    ValidationError,
    field_validator,
)

from jobhub.errors import MalformedResponse


def _empty_text(value: Any) -> Any:
    return "" if value is None else value


def _empty_list(value: Any) -> Any:
    return [] if value is None else value


def _false_if_null(value: Any) -> Any:
    return False if value is None else value


def _empty_object(value: Any) -> Any:
    return {} if value is None else value


def _finite_number(value: Any) -> Any:
    if value is None:
        return None
    # bool is an int subclass but never a salary
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValueError(f"expected a finite number, got {value!r}")
    return value


Text = Annotated[StrictStr, BeforeValidator(_empty_text)]
TextList = Annotated[list[StrictStr], BeforeValidator(_empty_list)]
Flag = Annotated[StrictBool, BeforeValidator(_false_if_null)]
Amount = Annotated[Optional[float], BeforeValidator(_finite_number)]


def _validate(model: type[BaseModel], value: Any, where: str, **extra: Any) -> Any:
    if not isinstance(value, Mapping):
        raise MalformedResponse(where, f"expected an object, got {type(value).__name__}")
    try:
        return model.model_validate({**value, **extra})
    except ValidationError as exc:
        error = exc.errors()[0]
        # innermost named key: ("job_benefits", 0) -> "job_benefits"
        field = next((p for p in reversed(error["loc"]) if isinstance(p, str)), where)
        raise MalformedResponse(field, error["msg"]) from exc


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class JobHighlights(_ApiModel):
    qualifications: TextList = Field(default_factory=list, alias="Qualifications")
    responsibilities: TextList = Field(default_factory=list, alias="Responsibilities")
    benefits: TextList = Field(default_factory=list, alias="Benefits")


class RequiredExperience(_ApiModel):
    no_experience_required: Flag = False
    experience_mentioned: Flag = False
    experience_preferred: Flag = False
    required_months: Optional[NonNegativeInt] = Field(
        default=None, alias="required_experience_in_months"
    )

    @field_validator("required_months", mode="before")
    @classmethod
    def whole_months(cls, value: Any) -> Any:
        if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
            raise ValueError(f"expected a non-negative integer, got {value!r}")
        return value


class JobSummary(_ApiModel):
    id: StrictStr = Field(alias="job_id", min_length=1)
    title: Text = Field(default="", alias="job_title")
    employer_name: Text = ""
    description: Text = Field(default="", alias="job_description")
    apply_link: Text = Field(default="", alias="job_apply_link")
    city: Text = Field(default="", alias="job_city")
    state: Text = Field(default="", alias="job_state")
    country: Text = Field(default="", alias="job_country")
    employment_type: Text = Field(default="", alias="job_employment_type")
    posted_at: Text = Field(default="", alias="job_posted_at_datetime_utc")
    salary_min: Amount = Field(default=None, alias="job_salary_min")
    salary_max: Amount = Field(default=None, alias="job_salary_max")
    salary_currency: Text = Field(default="", alias="job_salary_currency")
    benefits: TextList = Field(default_factory=list, alias="job_benefits")
    required_skills: TextList = Field(default_factory=list, alias="job_required_skills")
    highlights: Annotated[JobHighlights, BeforeValidator(_empty_object)] = Field(
        default_factory=JobHighlights, alias="job_highlights"
    )
    raw: dict[str, Any] = Field(default_factory=dict, repr=False)

    @classmethod
    def from_api(cls, value: Any) -> JobSummary:
        raw = dict(value) if isinstance(value, Mapping) else {}
        return _validate(cls, value, "data[]", raw=raw)


class JobDetail(JobSummary):
    description_html: Text = Field(default="", alias="job_description_html")
    google_link: Text = Field(default="", alias="job_google_link")
    expires_at: Text = Field(default="", alias="job_offer_expiration_datetime_utc")
    required_experience: Annotated[RequiredExperience, BeforeValidator(_empty_object)] = Field(
        default_factory=RequiredExperience, alias="job_required_experience"
    )

    @classmethod
    def from_api(cls, value: Any) -> JobDetail:
        raw = dict(value) if isinstance(value, Mapping) else {}
        return _validate(cls, value, "data[0]", raw=raw)


@dataclass
class SearchQuery:
    """One page of ``/search`` results for a free-text query."""

    text: str
    country: str = "in"
    date_posted: str = "all"
    page: int = 1
    num_pages: int = 1

    def to_params(self) -> dict[str, str]:
        return {
            "query": self.text,
            "page": str(self.page),
            "num_pages": str(self.num_pages),
            "country": self.country,
            "date_posted": self.date_posted,
        }
