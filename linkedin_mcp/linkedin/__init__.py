"""LinkedIn module - REST client and domain schemas."""

from .client import LinkedInClient
from .exceptions import LinkedInAPIError, LinkedInTimeoutError, LinkedInUnavailableError
from .schemas import (
    CertificationInput,
    Connection,
    CreatedEntity,
    DateInfo,
    EducationInput,
    LanguageInput,
    LanguageProficiency,
    PersonSearchResult,
    PositionInput,
    PositionUpdate,
    Post,
    Profile,
    PublicationInput,
    SharePostResult,
    SkillInput,
)


__all__ = [
    # Client
    "LinkedInClient",
    # Exceptions
    "LinkedInAPIError",
    "LinkedInTimeoutError",
    "LinkedInUnavailableError",
    # Schemas
    "CertificationInput",
    "Connection",
    "CreatedEntity",
    "DateInfo",
    "EducationInput",
    "LanguageInput",
    "LanguageProficiency",
    "PersonSearchResult",
    "PositionInput",
    "PositionUpdate",
    "Post",
    "Profile",
    "PublicationInput",
    "SharePostResult",
    "SkillInput",
]
