"""ListLinkedResearchers query handler."""

from papershare.application.errors import ApplicationError
from papershare.application.queries.researcher_queries import ListLinkedResearchers
from papershare.core.result import Result, Success
from papershare.domain.entities import LinkedResearcher
from papershare.domain.protocols import LinkedResearcherRepository


class ListLinkedResearchersHandler:
    """Handler for ListLinkedResearchers query."""

    def __init__(self, linked_researcher_repo: LinkedResearcherRepository) -> None:
        self._repo = linked_researcher_repo

    async def handle(
        self, query: ListLinkedResearchers
    ) -> Result[list[LinkedResearcher], ApplicationError]:
        return Success(value=await self._repo.list_for_user(query.user_id))
