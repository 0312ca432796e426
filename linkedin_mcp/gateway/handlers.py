"""Tool routing: maps each tool name to its argument record and handler.

Handlers translate validated arguments into one LinkedIn client call.
Reads, searches and post sharing return the client's result untouched;
profile edits return a confirmation sentence. Client failures propagate.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from linkedin_mcp.catalog.service import get_tool
from linkedin_mcp.linkedin.client import LinkedInClient
from linkedin_mcp.linkedin.schemas import (
    CertificationInput,
    DateInfo,
    EducationInput,
    LanguageInput,
    PositionInput,
    PositionUpdate,
    PublicationInput,
    SkillInput,
)

from .arguments import (
    AddCertificationArguments,
    AddEducationArguments,
    AddLanguageArguments,
    AddPositionArguments,
    AddPublicationArguments,
    AddSkillArguments,
    DeleteCertificationArguments,
    DeleteEducationArguments,
    DeleteLanguageArguments,
    DeletePositionArguments,
    DeletePublicationArguments,
    DeleteSkillArguments,
    LimitArguments,
    NoArguments,
    SearchPeopleArguments,
    SharePostArguments,
    ToolArguments,
    UpdatePositionArguments,
    validate_arguments,
)
from .exceptions import UnknownToolError


DEFAULT_POSTS_LIMIT = 10
DEFAULT_CONNECTIONS_LIMIT = 50
DEFAULT_SEARCH_LIMIT = 10

ToolHandler = Callable[[LinkedInClient, Any], Awaitable[Any]]


@dataclass(frozen=True)
class ToolRoute:
    """Argument record type and handler for one tool."""

    arguments: type[ToolArguments]
    handler: ToolHandler


def _date(year: int | None, month: int | None = None, day: int | None = None) -> DateInfo | None:
    # Month and day only mean something alongside a year.
    if year is None:
        return None
    return DateInfo(year=year, month=month, day=day)


async def get_profile(client: LinkedInClient, args: NoArguments) -> Any:
    return await client.get_profile()


async def get_posts(client: LinkedInClient, args: LimitArguments) -> Any:
    limit = args.limit if args.limit is not None else DEFAULT_POSTS_LIMIT
    return await client.get_posts(limit)


async def get_connections(client: LinkedInClient, args: LimitArguments) -> Any:
    limit = args.limit if args.limit is not None else DEFAULT_CONNECTIONS_LIMIT
    return await client.get_connections(limit)


async def share_post(client: LinkedInClient, args: SharePostArguments) -> Any:
    return await client.share_post(args.text)


async def search_people(client: LinkedInClient, args: SearchPeopleArguments) -> Any:
    limit = args.limit if args.limit is not None else DEFAULT_SEARCH_LIMIT
    return await client.search_people(args.keywords, limit)


async def add_skill(client: LinkedInClient, args: AddSkillArguments) -> str:
    result = await client.add_skill(SkillInput(name=args.name))
    return f"Successfully added skill: {args.name} (ID: {result.id})"


async def delete_skill(client: LinkedInClient, args: DeleteSkillArguments) -> str:
    await client.delete_skill(args.skill_id)
    return f"Successfully deleted skill: {args.skill_id}"


async def add_position(client: LinkedInClient, args: AddPositionArguments) -> str:
    position = PositionInput(
        title=args.title,
        company=args.company,
        description=args.description,
        start_date=_date(args.start_year, args.start_month),
        end_date=_date(args.end_year, args.end_month),
        current=args.current,
    )
    result = await client.add_position(position)
    return f"Successfully added position: {args.title} at {args.company} (ID: {result.id})"


async def update_position(client: LinkedInClient, args: UpdatePositionArguments) -> str:
    """Send a partial update with only the fields the caller supplied.

    A supplied empty string is kept, so a field can be cleared. Dates are
    only updated when their year is given.
    """
    update = PositionUpdate(
        title=args.title,
        company=args.company,
        description=args.description,
        start_date=_date(args.start_year, args.start_month),
        end_date=_date(args.end_year, args.end_month),
    )
    await client.update_position(args.position_id, update)
    return f"Successfully updated position: {args.position_id}"


async def delete_position(client: LinkedInClient, args: DeletePositionArguments) -> str:
    await client.delete_position(args.position_id)
    return f"Successfully deleted position: {args.position_id}"


async def add_education(client: LinkedInClient, args: AddEducationArguments) -> str:
    education = EducationInput(
        school_name=args.school_name,
        degree=args.degree,
        field_of_study=args.field_of_study,
        start_date=_date(args.start_year, args.start_month),
        end_date=_date(args.end_year, args.end_month),
        grade=args.grade,
        activities=args.activities,
    )
    result = await client.add_education(education)
    return f"Successfully added education: {args.school_name} (ID: {result.id})"


async def delete_education(client: LinkedInClient, args: DeleteEducationArguments) -> str:
    await client.delete_education(args.education_id)
    return f"Successfully deleted education: {args.education_id}"


async def add_certification(client: LinkedInClient, args: AddCertificationArguments) -> str:
    certification = CertificationInput(
        name=args.name,
        authority=args.authority,
        license_number=args.license_number,
        start_date=_date(args.start_year, args.start_month),
        end_date=_date(args.end_year, args.end_month),
        url=args.url,
    )
    result = await client.add_certification(certification)
    return (
        f"Successfully added certification: {args.name} from {args.authority} "
        f"(ID: {result.id})"
    )


async def delete_certification(client: LinkedInClient, args: DeleteCertificationArguments) -> str:
    await client.delete_certification(args.certification_id)
    return f"Successfully deleted certification: {args.certification_id}"


async def add_publication(client: LinkedInClient, args: AddPublicationArguments) -> str:
    publication = PublicationInput(
        name=args.name,
        publisher=args.publisher,
        date=_date(args.year, args.month, args.day),
        description=args.description,
        url=args.url,
    )
    result = await client.add_publication(publication)
    return f"Successfully added publication: {args.name} (ID: {result.id})"


async def delete_publication(client: LinkedInClient, args: DeletePublicationArguments) -> str:
    await client.delete_publication(args.publication_id)
    return f"Successfully deleted publication: {args.publication_id}"


async def add_language(client: LinkedInClient, args: AddLanguageArguments) -> str:
    result = await client.add_language(
        LanguageInput(name=args.name, proficiency=args.proficiency)
    )
    return f"Successfully added language: {args.name} (ID: {result.id})"


async def delete_language(client: LinkedInClient, args: DeleteLanguageArguments) -> str:
    await client.delete_language(args.language_id)
    return f"Successfully deleted language: {args.language_id}"


TOOL_ROUTES: dict[str, ToolRoute] = {
    "get_linkedin_profile": ToolRoute(NoArguments, get_profile),
    "get_linkedin_posts": ToolRoute(LimitArguments, get_posts),
    "get_linkedin_connections": ToolRoute(LimitArguments, get_connections),
    "share_linkedin_post": ToolRoute(SharePostArguments, share_post),
    "search_linkedin_people": ToolRoute(SearchPeopleArguments, search_people),
    "add_linkedin_skill": ToolRoute(AddSkillArguments, add_skill),
    "delete_linkedin_skill": ToolRoute(DeleteSkillArguments, delete_skill),
    "add_linkedin_position": ToolRoute(AddPositionArguments, add_position),
    "update_linkedin_position": ToolRoute(UpdatePositionArguments, update_position),
    "delete_linkedin_position": ToolRoute(DeletePositionArguments, delete_position),
    "add_linkedin_education": ToolRoute(AddEducationArguments, add_education),
    "delete_linkedin_education": ToolRoute(DeleteEducationArguments, delete_education),
    "add_linkedin_certification": ToolRoute(AddCertificationArguments, add_certification),
    "delete_linkedin_certification": ToolRoute(DeleteCertificationArguments, delete_certification),
    "add_linkedin_publication": ToolRoute(AddPublicationArguments, add_publication),
    "delete_linkedin_publication": ToolRoute(DeletePublicationArguments, delete_publication),
    "add_linkedin_language": ToolRoute(AddLanguageArguments, add_language),
    "delete_linkedin_language": ToolRoute(DeleteLanguageArguments, delete_language),
}


def routed_tool_names() -> set[str]:
    """Names of every tool the router can dispatch."""
    return set(TOOL_ROUTES)


async def dispatch(client: LinkedInClient, name: str, arguments: dict[str, Any] | None) -> Any:
    """Validate a tool call and run its handler.

    Args:
        client: LinkedIn client the handler calls.
        name: Tool name from the tools/call request.
        arguments: Raw arguments from the request.

    Returns:
        The handler's result: a domain object, a list of them, or a
        confirmation sentence.

    Raises:
        UnknownToolError: If no route or catalog entry exists for name.
        MissingArgumentError: If required arguments are absent.
        InvalidArgumentError: If arguments have the wrong type.
        LinkedInAPIError: If the LinkedIn API call fails.
    """
    route = TOOL_ROUTES.get(name)
    descriptor = get_tool(name)
    if route is None or descriptor is None:
        raise UnknownToolError(name)

    validated = validate_arguments(descriptor, route.arguments, arguments)
    return await route.handler(client, validated)
