"""Linked researcher command handlers (link / unlink)."""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from papershare.application.commands.researcher_commands import (
    LinkResearcher,
    UnlinkResearcher,
)
from papershare.application.errors import (
    ApplicationError,
    conflict,
    execution_failed,
    invalid,
    not_found,
)
from papershare.core.enums import ErrorCode
from papershare.core.result import Result, Success
from papershare.domain.entities import LinkedResearcher
from papershare.domain.protocols import LinkedResearcherRepository


class ResearcherError:
    """Linked researcher errors."""

    FIELDS_REQUIRED = "ORCID iD and researcher name are required"
    ALREADY_LINKED = "Researcher already linked"
    NOT_FOUND = "Researcher not found"
    DATABASE_ERROR = "Failed to update linked researchers"


class LinkResearcherHandler:
    """Handler for LinkResearcher command."""

    def __init__(self, linked_researcher_repo: LinkedResearcherRepository) -> None:
        self._repo = linked_researcher_repo

    async def handle(self, cmd: LinkResearcher) -> Result[LinkedResearcher, ApplicationError]:
        orcid_id = cmd.orcid_id.strip()
        name = cmd.researcher_name.strip()
        if not orcid_id or not name:
            return invalid(ResearcherError.FIELDS_REQUIRED, code=ErrorCode.INVALID_INPUT)

        researcher = LinkedResearcher(
            id=uuid7(),
            user_id=cmd.user_id,
            orcid_id=orcid_id,
            researcher_name=name,
            created_at=datetime.now(UTC),
        )
        try:
            created = await self._repo.save(researcher)
        except Exception as e:
            return execution_failed(ResearcherError.DATABASE_ERROR, e)

        if not created:
            return conflict(
                ErrorCode.RESEARCHER_ALREADY_LINKED,
                "LinkedResearcher",
                ResearcherError.ALREADY_LINKED,
                conflicting_field="user_id,orcid_id",
            )
        return Success(value=researcher)


class UnlinkResearcherHandler:
    """Handler for UnlinkResearcher command."""

    def __init__(self, linked_researcher_repo: LinkedResearcherRepository) -> None:
        self._repo = linked_researcher_repo

    async def handle(self, cmd: UnlinkResearcher) -> Result[None, ApplicationError]:
        try:
            deleted = await self._repo.delete(cmd.user_id, cmd.orcid_id)
        except Exception as e:
            return execution_failed(ResearcherError.DATABASE_ERROR, e)

        if not deleted:
            return not_found(
                ErrorCode.RESEARCHER_NOT_FOUND,
                "LinkedResearcher",
                cmd.orcid_id,
                ResearcherError.NOT_FOUND,
            )
        return Success(value=None)
