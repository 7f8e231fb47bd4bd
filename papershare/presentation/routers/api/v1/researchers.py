"""Linked researcher resource handlers.

Handlers:
    list_researchers  - Researchers linked to the user
    link_researcher   - Link an ORCID iD
    unlink_researcher - Remove a link
"""

from typing import Annotated

from fastapi import Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse

from papershare.application.commands import LinkResearcher, UnlinkResearcher
from papershare.application.commands.handlers.researcher_handlers import (
    LinkResearcherHandler,
    UnlinkResearcherHandler,
)
from papershare.application.queries import ListLinkedResearchers
from papershare.application.queries.handlers.list_linked_researchers_handler import (
    ListLinkedResearchersHandler,
)
from papershare.core.container import (
    get_link_researcher_handler,
    get_list_linked_researchers_handler,
    get_unlink_researcher_handler,
)
from papershare.core.result import Failure
from papershare.presentation.api.middleware import get_trace_id
from papershare.presentation.routers.api.middleware import AuthenticatedUser
from papershare.presentation.routers.api.v1.errors import ErrorResponseBuilder
from papershare.schemas import (
    LinkResearcherRequest,
    ResearcherListResponse,
    ResearcherResponse,
)


async def list_researchers(
    request: Request,
    current_user: AuthenticatedUser,
    handler: ListLinkedResearchersHandler = Depends(get_list_linked_researchers_handler),
) -> ResearcherListResponse | JSONResponse:
    """GET /api/v1/researchers → 200 OK"""
    result = await handler.handle(ListLinkedResearchers(user_id=current_user.user_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ResearcherListResponse.from_entities(result.value)


async def link_researcher(
    request: Request,
    current_user: AuthenticatedUser,
    data: LinkResearcherRequest,
    handler: LinkResearcherHandler = Depends(get_link_researcher_handler),
) -> ResearcherResponse | JSONResponse:
    """Link a researcher to the user.

    POST /api/v1/researchers → 201 Created
    """
    result = await handler.handle(
        LinkResearcher(
            user_id=current_user.user_id,
            orcid_id=data.orcid_id,
            researcher_name=data.researcher_name,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ResearcherResponse.from_entity(result.value)


async def unlink_researcher(
    request: Request,
    current_user: AuthenticatedUser,
    orcid_id: Annotated[str, Path(description="ORCID iD")],
    handler: UnlinkResearcherHandler = Depends(get_unlink_researcher_handler),
) -> Response:
    """DELETE /api/v1/researchers/{orcid_id} → 204 No Content"""
    result = await handler.handle(
        UnlinkResearcher(user_id=current_user.user_id, orcid_id=orcid_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
