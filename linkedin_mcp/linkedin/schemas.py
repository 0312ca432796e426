"""Pydantic schemas for LinkedIn domain objects.

Fields are snake_case in Python and camelCase on the wire. Unset optional
fields are None and are left out of request bodies and rendered output.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LinkedInModel(BaseModel):
    """Base model using LinkedIn's camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize for a request body, dropping unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class LanguageProficiency(str, Enum):
    """Proficiency levels accepted by the languages profile section."""

    ELEMENTARY = "ELEMENTARY"
    LIMITED_WORKING = "LIMITED_WORKING"
    PROFESSIONAL_WORKING = "PROFESSIONAL_WORKING"
    FULL_PROFESSIONAL = "FULL_PROFESSIONAL"
    NATIVE_OR_BILINGUAL = "NATIVE_OR_BILINGUAL"


class DateInfo(LinkedInModel):
    """Partial date; month and day stay unset when unknown."""

    year: int
    month: int | None = None
    day: int | None = None


class Profile(LinkedInModel):
    """The authenticated member's profile."""

    id: str
    first_name: str | None = None
    last_name: str | None = None
    headline: str | None = None
    email: str | None = None
    profile_picture: str | None = None
    locale: str | None = None


class Post(LinkedInModel):
    """A post authored by the member."""

    id: str
    text: str | None = None
    created_at: int | None = None
    visibility: str | None = None
    lifecycle_state: str | None = None


class Connection(LinkedInModel):
    """A first-degree connection."""

    id: str
    first_name: str | None = None
    last_name: str | None = None
    headline: str | None = None
    profile_url: str | None = None


class PersonSearchResult(LinkedInModel):
    """A person returned by people search."""

    id: str
    first_name: str | None = None
    last_name: str | None = None
    headline: str | None = None
    location: str | None = None
    profile_url: str | None = None


class SharePostResult(LinkedInModel):
    """Outcome of publishing a post."""

    id: str
    text: str
    visibility: str = "PUBLIC"


class CreatedEntity(LinkedInModel):
    """Identifier assigned to a newly created profile entry."""

    id: str


class SkillInput(LinkedInModel):
    name: str


class PositionInput(LinkedInModel):
    title: str
    company: str
    description: str | None = None
    start_date: DateInfo
    end_date: DateInfo | None = None
    current: bool | None = None


class PositionUpdate(LinkedInModel):
    """Partial update for a position; only set fields are sent."""

    title: str | None = None
    company: str | None = None
    description: str | None = None
    start_date: DateInfo | None = None
    end_date: DateInfo | None = None


class EducationInput(LinkedInModel):
    school_name: str
    degree: str | None = None
    field_of_study: str | None = None
    start_date: DateInfo | None = None
    end_date: DateInfo | None = None
    grade: str | None = None
    activities: str | None = None


class CertificationInput(LinkedInModel):
    name: str
    authority: str
    license_number: str | None = None
    start_date: DateInfo | None = None
    end_date: DateInfo | None = None
    url: str | None = None


class PublicationInput(LinkedInModel):
    name: str
    publisher: str | None = None
    date: DateInfo | None = None
    description: str | None = None
    url: str | None = None


class LanguageInput(LinkedInModel):
    name: str
    proficiency: LanguageProficiency | None = None
