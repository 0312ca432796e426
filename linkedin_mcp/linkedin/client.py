"""Async HTTP client for the LinkedIn REST API."""

from typing import Any

import httpx
import structlog

from .exceptions import LinkedInAPIError, LinkedInTimeoutError, LinkedInUnavailableError
from .schemas import (
    CertificationInput,
    Connection,
    CreatedEntity,
    EducationInput,
    LanguageInput,
    PersonSearchResult,
    PositionInput,
    PositionUpdate,
    Post,
    Profile,
    PublicationInput,
    SharePostResult,
    SkillInput,
)


DEFAULT_BASE_URL = "https://api.linkedin.com"
DEFAULT_API_VERSION = "202401"
DEFAULT_TIMEOUT_SECONDS = 30.0
PROFILE_URL_PREFIX = "https://www.linkedin.com/in/"
RESTLI_ID_HEADER = "x-restli-id"


class LinkedInClient:
    """Thin wrapper over LinkedIn's REST endpoints.

    Each public method performs one API operation and returns parsed
    domain objects. Failures are raised as LinkedInAPIError subclasses.

    Attributes:
        base_url: Root URL of the LinkedIn API.
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: httpx.AsyncClient | None = None,
        logger: Any | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            access_token: OAuth 2.0 bearer token for the member.
            base_url: Root URL of the LinkedIn API.
            api_version: Value for the LinkedIn-Version header.
            timeout: Per-request timeout in seconds.
            http_client: Shared HTTP client; one is created when omitted.
            logger: structlog logger, defaults to the "linkedin" logger.

        Raises:
            ValueError: If no access token is given.
        """
        if not access_token:
            raise ValueError("LinkedIn access token is required")

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(base_url=self.base_url, timeout=timeout)
        self._headers = {
            "Authorization": f"Bearer {access_token}",
            "X-Restli-Protocol-Version": "2.0.0",
            "LinkedIn-Version": api_version,
        }
        self._logger = logger or structlog.get_logger("linkedin")
        self._member_id: str | None = None

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http_client:
            await self._http.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send one request and map transport and HTTP failures.

        Raises:
            LinkedInTimeoutError: If LinkedIn doesn't respond in time.
            LinkedInUnavailableError: If the connection fails.
            LinkedInAPIError: If LinkedIn returns an HTTP error status.
        """
        request_headers = {**self._headers, **(headers or {})}
        try:
            response = await self._http.request(
                method,
                path,
                params=params,
                json=json,
                headers=request_headers,
                timeout=self.timeout,
            )
        except httpx.TimeoutException:
            raise LinkedInTimeoutError(path=path, timeout_seconds=self.timeout)
        except httpx.ConnectError as e:
            raise LinkedInUnavailableError(path=path, reason=str(e))
        except httpx.RequestError as e:
            raise LinkedInUnavailableError(path=path, reason=f"Request failed: {e}")

        self._logger.debug(
            "linkedin_request",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        if response.status_code >= 400:
            raise LinkedInAPIError(
                message=_error_detail(response),
                status_code=response.status_code,
                path=path,
            )
        return response

    async def _member_urn(self) -> str:
        if self._member_id is None:
            profile = await self.get_profile()
            self._member_id = profile.id
        return f"urn:li:person:{self._member_id}"

    async def _section_path(self, section: str) -> str:
        await self._member_urn()
        return f"/v2/people/(id:{self._member_id})/{section}"

    async def _create_entry(self, section: str, payload: dict[str, Any]) -> CreatedEntity:
        path = await self._section_path(section)
        response = await self._request("POST", path, json=payload)
        return CreatedEntity(id=_created_id(response))

    async def _delete_entry(self, section: str, entry_id: str) -> None:
        path = await self._section_path(section)
        await self._request("DELETE", f"{path}/{entry_id}")

    async def get_profile(self) -> Profile:
        response = await self._request("GET", "/v2/userinfo")
        data = response.json()
        profile = Profile(
            id=data["sub"],
            first_name=data.get("given_name"),
            last_name=data.get("family_name"),
            headline=data.get("headline"),
            email=data.get("email"),
            profile_picture=data.get("picture"),
            locale=_format_locale(data.get("locale")),
        )
        self._member_id = profile.id
        return profile

    async def get_posts(self, limit: int) -> list[Post]:
        author = await self._member_urn()
        response = await self._request(
            "GET",
            "/rest/posts",
            params={"q": "author", "author": author, "count": limit},
        )
        return [
            Post(
                id=element["id"],
                text=element.get("commentary"),
                created_at=element.get("createdAt"),
                visibility=element.get("visibility"),
                lifecycle_state=element.get("lifecycleState"),
            )
            for element in _elements(response)
        ]

    async def get_connections(self, limit: int) -> list[Connection]:
        response = await self._request(
            "GET",
            "/v2/connections",
            params={"q": "viewer", "start": 0, "count": limit},
        )
        return [Connection(**_person_fields(element)) for element in _elements(response)]

    async def share_post(self, text: str) -> SharePostResult:
        author = await self._member_urn()
        body = {
            "author": author,
            "commentary": text,
            "visibility": "PUBLIC",
            "distribution": {
                "feedDistribution": "MAIN_FEED",
                "targetEntities": [],
                "thirdPartyDistributionChannels": [],
            },
            "lifecycleState": "PUBLISHED",
            "isReshareDisabledByAuthor": False,
        }
        response = await self._request("POST", "/rest/posts", json=body)
        return SharePostResult(id=_created_id(response), text=text)

    async def search_people(self, keywords: str, limit: int) -> list[PersonSearchResult]:
        response = await self._request(
            "GET",
            "/v2/peopleSearch",
            params={"q": "keywords", "keywords": keywords, "count": limit},
        )
        return [
            PersonSearchResult(
                **_person_fields(element),
                location=element.get("locationName"),
            )
            for element in _elements(response)
        ]

    async def add_skill(self, skill: SkillInput) -> CreatedEntity:
        return await self._create_entry("skills", skill.to_payload())

    async def delete_skill(self, skill_id: str) -> None:
        await self._delete_entry("skills", skill_id)

    async def add_position(self, position: PositionInput) -> CreatedEntity:
        return await self._create_entry("positions", position.to_payload())

    async def update_position(self, position_id: str, update: PositionUpdate) -> None:
        path = await self._section_path("positions")
        await self._request(
            "POST",
            f"{path}/{position_id}",
            json={"patch": {"$set": update.to_payload()}},
            headers={"X-RestLi-Method": "PARTIAL_UPDATE"},
        )

    async def delete_position(self, position_id: str) -> None:
        await self._delete_entry("positions", position_id)

    async def add_education(self, education: EducationInput) -> CreatedEntity:
        return await self._create_entry("educations", education.to_payload())

    async def delete_education(self, education_id: str) -> None:
        await self._delete_entry("educations", education_id)

    async def add_certification(self, certification: CertificationInput) -> CreatedEntity:
        return await self._create_entry("certifications", certification.to_payload())

    async def delete_certification(self, certification_id: str) -> None:
        await self._delete_entry("certifications", certification_id)

    async def add_publication(self, publication: PublicationInput) -> CreatedEntity:
        return await self._create_entry("publications", publication.to_payload())

    async def delete_publication(self, publication_id: str) -> None:
        await self._delete_entry("publications", publication_id)

    async def add_language(self, language: LanguageInput) -> CreatedEntity:
        return await self._create_entry("languages", language.to_payload())

    async def delete_language(self, language_id: str) -> None:
        await self._delete_entry("languages", language_id)


def _elements(response: httpx.Response) -> list[dict[str, Any]]:
    return response.json().get("elements", [])


def _created_id(response: httpx.Response) -> str:
    """Read the id LinkedIn assigned to a created entity.

    LinkedIn returns it in the x-restli-id header, with some endpoints
    also echoing it in the body.
    """
    created_id = response.headers.get(RESTLI_ID_HEADER)
    if not created_id and response.content:
        created_id = response.json().get("id")
    if not created_id:
        raise LinkedInAPIError(
            message="LinkedIn did not return an id for the created entity",
            status_code=response.status_code,
        )
    return str(created_id)


def _person_fields(element: dict[str, Any]) -> dict[str, Any]:
    vanity_name = element.get("vanityName")
    return {
        "id": element["id"],
        "first_name": element.get("localizedFirstName"),
        "last_name": element.get("localizedLastName"),
        "headline": element.get("localizedHeadline"),
        "profile_url": f"{PROFILE_URL_PREFIX}{vanity_name}" if vanity_name else None,
    }


def _format_locale(locale: Any) -> str | None:
    # userinfo returns either "en_US" or {"language": "en", "country": "US"}
    if isinstance(locale, dict):
        language = locale.get("language")
        country = locale.get("country")
        return "_".join(part for part in (language, country) if part) or None
    return locale


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    text = response.text[:200]  # Truncate for safety
    if text:
        return f"LinkedIn API returned {response.status_code}: {text}"
    return f"LinkedIn API returned {response.status_code}"
