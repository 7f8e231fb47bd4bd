"""Materialize the route registry onto an APIRouter.

The registry is the single list of endpoints; this module only translates
each entry's auth level into dependencies and its error list into OpenAPI
response documentation.
"""

from typing import Any

from fastapi import APIRouter, Depends

from papershare.presentation.routers.api.middleware.auth_dependencies import (
    get_current_identity,
    get_current_user,
)
from papershare.presentation.routers.api.v1.errors.problem_details import ProblemDetails
from papershare.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    RouteMetadata,
)


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Add one FastAPI route per ``RouteMetadata`` entry, in registry order."""
    for metadata in registry:
        responses = _build_responses(metadata.errors) if metadata.errors else None

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=responses,
            dependencies=_build_dependencies(metadata.auth_policy),
            deprecated=metadata.deprecated,
        )


def _build_dependencies(auth_policy: AuthPolicy) -> list[Any]:
    # IDENTIFIED only needs a valid token (first-login init); AUTHENTICATED
    # also needs the local user row. FastAPI caches both per request.
    match auth_policy.level:
        case AuthLevel.PUBLIC:
            return []
        case AuthLevel.IDENTIFIED:
            return [Depends(get_current_identity)]
        case AuthLevel.AUTHENTICATED:
            return [Depends(get_current_user)]
        case _:
            msg = f"Unknown auth level: {auth_policy.level}"
            raise ValueError(msg)


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    return {
        error.status: {"description": error.description, "model": error.model or ProblemDetails}
        for error in errors
    }
