"""Typed argument records and validation for each tool.

Required fields are read from the tool's catalog descriptor, so the
presence check stays in sync with what tools/list advertises. The
pydantic models then check types and expose snake_case attributes.
"""

import re
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from linkedin_mcp.catalog.schemas import ToolDescriptor
from linkedin_mcp.linkedin.schemas import LanguageProficiency

from .exceptions import InvalidArgumentError, MissingArgumentError


ArgumentsT = TypeVar("ArgumentsT", bound="ToolArguments")

_CAMEL_BOUNDARY_RE = re.compile(r"(?<!^)(?=[A-Z])")

Month = Annotated[int, Field(ge=1, le=12)]
Day = Annotated[int, Field(ge=1, le=31)]
Year = Annotated[int, Field(ge=1)]


class ToolArguments(BaseModel):
    """Base record for validated tool arguments.

    Accepts the camelCase names advertised in the catalog. Unknown keys
    are ignored and absent optional fields stay None.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class NoArguments(ToolArguments):
    pass


class LimitArguments(ToolArguments):
    limit: int | None = None


class SearchPeopleArguments(ToolArguments):
    keywords: str
    limit: int | None = None


class SharePostArguments(ToolArguments):
    text: str


class AddSkillArguments(ToolArguments):
    name: str


class AddPositionArguments(ToolArguments):
    title: str
    company: str
    start_year: Year
    description: str | None = None
    start_month: Month | None = None
    end_year: Year | None = None
    end_month: Month | None = None
    current: bool | None = None


class UpdatePositionArguments(ToolArguments):
    position_id: str
    title: str | None = None
    company: str | None = None
    description: str | None = None
    start_year: Year | None = None
    start_month: Month | None = None
    end_year: Year | None = None
    end_month: Month | None = None


class AddEducationArguments(ToolArguments):
    school_name: str
    degree: str | None = None
    field_of_study: str | None = None
    start_year: Year | None = None
    start_month: Month | None = None
    end_year: Year | None = None
    end_month: Month | None = None
    grade: str | None = None
    activities: str | None = None


class AddCertificationArguments(ToolArguments):
    name: str
    authority: str
    license_number: str | None = None
    start_year: Year | None = None
    start_month: Month | None = None
    end_year: Year | None = None
    end_month: Month | None = None
    url: str | None = None


class AddPublicationArguments(ToolArguments):
    name: str
    publisher: str | None = None
    year: Year | None = None
    month: Month | None = None
    day: Day | None = None
    description: str | None = None
    url: str | None = None


class AddLanguageArguments(ToolArguments):
    name: str
    proficiency: LanguageProficiency | None = None


class DeleteSkillArguments(ToolArguments):
    skill_id: str


class DeletePositionArguments(ToolArguments):
    position_id: str


class DeleteEducationArguments(ToolArguments):
    education_id: str


class DeleteCertificationArguments(ToolArguments):
    certification_id: str


class DeletePublicationArguments(ToolArguments):
    publication_id: str


class DeleteLanguageArguments(ToolArguments):
    language_id: str


def humanize_field(name: str) -> str:
    """Turn an argument name into a label for error messages.

    Examples:
        >>> humanize_field("startYear")
        'Start year'
        >>> humanize_field("skillId")
        'Skill ID'
    """
    words = _CAMEL_BOUNDARY_RE.sub(" ", name).lower().split()
    label = " ".join("ID" if word == "id" else word for word in words)
    return label[:1].upper() + label[1:]


def missing_message(descriptor: ToolDescriptor, field: str) -> str:
    """Message reported when a required field is absent.

    The catalog may word it per tool; otherwise the field name is
    humanized.
    """
    return descriptor.missing_messages.get(field) or f"{humanize_field(field)} is required"


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _describe_validation_error(exc: ValidationError) -> str:
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        details.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(details)


def validate_arguments(
    descriptor: ToolDescriptor,
    model: type[ArgumentsT],
    arguments: dict[str, Any] | None,
) -> ArgumentsT:
    """Validate caller-supplied arguments for one tool.

    Args:
        descriptor: Catalog entry declaring the tool's required fields.
        model: Argument record type for the tool.
        arguments: Raw arguments from the tools/call request.

    Returns:
        The validated argument record.

    Raises:
        MissingArgumentError: If required fields are absent or empty. All
            missing fields are reported together.
        InvalidArgumentError: If a field has the wrong type or range.
    """
    arguments = arguments or {}

    missing = [
        field for field in descriptor.required_fields
        if _is_missing(arguments.get(field))
    ]
    if missing:
        raise MissingArgumentError(
            tool_name=descriptor.name,
            fields=missing,
            messages=[missing_message(descriptor, field) for field in missing],
        )

    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        raise InvalidArgumentError(
            tool_name=descriptor.name,
            detail=_describe_validation_error(e),
        ) from e
