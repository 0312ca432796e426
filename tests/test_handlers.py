"""Tests for tool routing and handlers."""

import pytest

from linkedin_mcp.gateway.exceptions import (
    InvalidArgumentError,
    MissingArgumentError,
    UnknownToolError,
)
from linkedin_mcp.gateway.handlers import (
    DEFAULT_CONNECTIONS_LIMIT,
    DEFAULT_POSTS_LIMIT,
    DEFAULT_SEARCH_LIMIT,
    dispatch,
)
from linkedin_mcp.linkedin.exceptions import LinkedInAPIError
from linkedin_mcp.linkedin.schemas import (
    CreatedEntity,
    DateInfo,
    LanguageProficiency,
    Post,
    Profile,
)


class TestReadTools:
    """Tests for reads and searches."""

    @pytest.mark.asyncio
    async def test_profile_returned_untouched(self, linkedin_client):
        profile = Profile(id="abc123", first_name="Ada")
        linkedin_client.get_profile.return_value = profile

        result = await dispatch(linkedin_client, "get_linkedin_profile", {})

        assert result is profile

    @pytest.mark.asyncio
    async def test_posts_default_limit(self, linkedin_client):
        linkedin_client.get_posts.return_value = []

        await dispatch(linkedin_client, "get_linkedin_posts", {})

        linkedin_client.get_posts.assert_awaited_once_with(DEFAULT_POSTS_LIMIT)
        assert DEFAULT_POSTS_LIMIT == 10

    @pytest.mark.asyncio
    async def test_posts_supplied_limit(self, linkedin_client):
        posts = [Post(id="p1"), Post(id="p2")]
        linkedin_client.get_posts.return_value = posts

        result = await dispatch(linkedin_client, "get_linkedin_posts", {"limit": 2})

        linkedin_client.get_posts.assert_awaited_once_with(2)
        assert result == posts

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool,method,arguments,expected", [
        ("get_linkedin_posts", "get_posts", {"limit": 0}, (0,)),
        ("get_linkedin_connections", "get_connections", {"limit": 0}, (0,)),
        ("search_linkedin_people", "search_people", {"keywords": "go", "limit": 0}, ("go", 0)),
    ])
    async def test_supplied_zero_limit_forwarded(
        self, linkedin_client, tool, method, arguments, expected
    ):
        getattr(linkedin_client, method).return_value = []

        await dispatch(linkedin_client, tool, arguments)

        getattr(linkedin_client, method).assert_awaited_once_with(*expected)

    @pytest.mark.asyncio
    async def test_connections_default_limit(self, linkedin_client):
        linkedin_client.get_connections.return_value = []

        await dispatch(linkedin_client, "get_linkedin_connections", None)

        linkedin_client.get_connections.assert_awaited_once_with(DEFAULT_CONNECTIONS_LIMIT)
        assert DEFAULT_CONNECTIONS_LIMIT == 50

    @pytest.mark.asyncio
    async def test_search_default_limit(self, linkedin_client):
        linkedin_client.search_people.return_value = []

        await dispatch(linkedin_client, "search_linkedin_people", {"keywords": "python"})

        linkedin_client.search_people.assert_awaited_once_with("python", DEFAULT_SEARCH_LIMIT)

    @pytest.mark.asyncio
    async def test_search_supplied_limit(self, linkedin_client):
        linkedin_client.search_people.return_value = []

        await dispatch(
            linkedin_client, "search_linkedin_people", {"keywords": "rust", "limit": 25}
        )

        linkedin_client.search_people.assert_awaited_once_with("rust", 25)

    @pytest.mark.asyncio
    async def test_share_post_passes_text(self, linkedin_client):
        linkedin_client.share_post.return_value = {"id": "urn:li:share:1"}

        await dispatch(linkedin_client, "share_linkedin_post", {"text": "Hello LinkedIn"})

        linkedin_client.share_post.assert_awaited_once_with("Hello LinkedIn")


class TestProfileEdits:
    """Tests for add, update and delete handlers."""

    @pytest.mark.asyncio
    async def test_add_skill_confirmation(self, linkedin_client):
        linkedin_client.add_skill.return_value = CreatedEntity(id="skill-9")

        result = await dispatch(linkedin_client, "add_linkedin_skill", {"name": "Python"})

        assert result == "Successfully added skill: Python (ID: skill-9)"
        skill = linkedin_client.add_skill.await_args.args[0]
        assert skill.to_payload() == {"name": "Python"}

    @pytest.mark.asyncio
    async def test_add_position_groups_dates(self, linkedin_client):
        linkedin_client.add_position.return_value = CreatedEntity(id="pos-1")

        result = await dispatch(linkedin_client, "add_linkedin_position", {
            "title": "Engineer",
            "company": "Acme",
            "startYear": 2020,
            "startMonth": 6,
            "current": True,
        })

        assert result == "Successfully added position: Engineer at Acme (ID: pos-1)"
        position = linkedin_client.add_position.await_args.args[0]
        assert position.start_date == DateInfo(year=2020, month=6)
        assert position.end_date is None
        assert position.to_payload() == {
            "title": "Engineer",
            "company": "Acme",
            "startDate": {"year": 2020, "month": 6},
            "current": True,
        }

    @pytest.mark.asyncio
    async def test_update_position_sends_only_supplied_fields(self, linkedin_client):
        result = await dispatch(linkedin_client, "update_linkedin_position", {
            "positionId": "pos-1",
            "title": "Staff Engineer",
        })

        assert result == "Successfully updated position: pos-1"
        position_id, update = linkedin_client.update_position.await_args.args
        assert position_id == "pos-1"
        assert update.to_payload() == {"title": "Staff Engineer"}

    @pytest.mark.asyncio
    async def test_update_position_keeps_empty_string(self, linkedin_client):
        await dispatch(linkedin_client, "update_linkedin_position", {
            "positionId": "pos-1",
            "description": "",
        })

        _, update = linkedin_client.update_position.await_args.args
        assert update.to_payload() == {"description": ""}

    @pytest.mark.asyncio
    async def test_update_position_ignores_month_without_year(self, linkedin_client):
        await dispatch(linkedin_client, "update_linkedin_position", {
            "positionId": "pos-1",
            "endMonth": 4,
        })

        _, update = linkedin_client.update_position.await_args.args
        assert update.to_payload() == {}

    @pytest.mark.asyncio
    async def test_update_position_rejects_zero_year(self, linkedin_client):
        with pytest.raises(InvalidArgumentError):
            await dispatch(linkedin_client, "update_linkedin_position", {
                "positionId": "p1",
                "title": "",
                "startYear": 0,
            })

        linkedin_client.update_position.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_add_certification_rejects_zero_year(self, linkedin_client):
        with pytest.raises(InvalidArgumentError):
            await dispatch(linkedin_client, "add_linkedin_certification", {
                "name": "CKA",
                "authority": "CNCF",
                "startYear": 0,
            })

        linkedin_client.add_certification.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_add_education_optional_fields(self, linkedin_client):
        linkedin_client.add_education.return_value = CreatedEntity(id="edu-1")

        result = await dispatch(linkedin_client, "add_linkedin_education", {
            "schoolName": "MIT",
            "fieldOfStudy": "Computer Science",
            "endYear": 2015,
        })

        assert result == "Successfully added education: MIT (ID: edu-1)"
        education = linkedin_client.add_education.await_args.args[0]
        assert education.to_payload() == {
            "schoolName": "MIT",
            "fieldOfStudy": "Computer Science",
            "endDate": {"year": 2015},
        }

    @pytest.mark.asyncio
    async def test_add_certification_confirmation(self, linkedin_client):
        linkedin_client.add_certification.return_value = CreatedEntity(id="cert-1")

        result = await dispatch(linkedin_client, "add_linkedin_certification", {
            "name": "CKA",
            "authority": "CNCF",
            "licenseNumber": "LF-123",
        })

        assert result == "Successfully added certification: CKA from CNCF (ID: cert-1)"

    @pytest.mark.asyncio
    async def test_add_publication_date(self, linkedin_client):
        linkedin_client.add_publication.return_value = CreatedEntity(id="pub-1")

        await dispatch(linkedin_client, "add_linkedin_publication", {
            "name": "On Gateways",
            "year": 2023,
            "month": 5,
            "day": 17,
        })

        publication = linkedin_client.add_publication.await_args.args[0]
        assert publication.date == DateInfo(year=2023, month=5, day=17)

    @pytest.mark.asyncio
    async def test_add_language(self, linkedin_client):
        linkedin_client.add_language.return_value = CreatedEntity(id="lang-1")

        result = await dispatch(linkedin_client, "add_linkedin_language", {
            "name": "German",
            "proficiency": "NATIVE_OR_BILINGUAL",
        })

        assert result == "Successfully added language: German (ID: lang-1)"
        language = linkedin_client.add_language.await_args.args[0]
        assert language.proficiency is LanguageProficiency.NATIVE_OR_BILINGUAL

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tool,field,method,noun", [
        ("delete_linkedin_skill", "skillId", "delete_skill", "skill"),
        ("delete_linkedin_position", "positionId", "delete_position", "position"),
        ("delete_linkedin_education", "educationId", "delete_education", "education"),
        ("delete_linkedin_certification", "certificationId", "delete_certification", "certification"),
        ("delete_linkedin_publication", "publicationId", "delete_publication", "publication"),
        ("delete_linkedin_language", "languageId", "delete_language", "language"),
    ])
    async def test_delete_confirmations(self, linkedin_client, tool, field, method, noun):
        result = await dispatch(linkedin_client, tool, {field: "id-42"})

        assert result == f"Successfully deleted {noun}: id-42"
        getattr(linkedin_client, method).assert_awaited_once_with("id-42")


class TestDispatchErrors:
    """Tests for routing failures."""

    @pytest.mark.asyncio
    async def test_unknown_tool(self, linkedin_client):
        with pytest.raises(UnknownToolError) as exc_info:
            await dispatch(linkedin_client, "get_linkedin_endorsements", {})

        assert exc_info.value.message == "Unknown tool: get_linkedin_endorsements"

    @pytest.mark.asyncio
    async def test_missing_argument_skips_client(self, linkedin_client):
        with pytest.raises(MissingArgumentError):
            await dispatch(linkedin_client, "delete_linkedin_skill", {})

        linkedin_client.delete_skill.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_client_error_propagates(self, linkedin_client):
        linkedin_client.add_skill.side_effect = LinkedInAPIError("Skill already exists", 409)

        with pytest.raises(LinkedInAPIError, match="Skill already exists"):
            await dispatch(linkedin_client, "add_linkedin_skill", {"name": "Python"})
