"""Suggestion resource handlers.

Candidate documents for the suggestion feed: everything the user owns or
was granted, narrowed in one batch against the relationship graph.
"""

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from papershare.application.queries import ListSuggestionCandidates
from papershare.application.queries.handlers.list_suggestion_candidates_handler import (
    ListSuggestionCandidatesHandler,
)
from papershare.core.container import get_list_suggestion_candidates_handler
from papershare.core.result import Failure
from papershare.presentation.api.middleware import get_trace_id
from papershare.presentation.routers.api.middleware import AuthenticatedUser
from papershare.presentation.routers.api.v1.errors import ErrorResponseBuilder
from papershare.schemas import SuggestionCandidatesResponse


async def list_suggestion_candidates(
    request: Request,
    current_user: AuthenticatedUser,
    handler: ListSuggestionCandidatesHandler = Depends(
        get_list_suggestion_candidates_handler
    ),
) -> SuggestionCandidatesResponse | JSONResponse:
    """List readable suggestion candidates.

    GET /api/v1/suggestions/candidates → 200 OK
    """
    result = await handler.handle(
        ListSuggestionCandidates(
            user_id=current_user.user_id,
            user_email=current_user.email,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return SuggestionCandidatesResponse.from_dto(result.value)
