"""Documents resource handlers.

Handler functions for document upload, retrieval, and sharing endpoints.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    get_document_status - Readable documents for a set of work ids
    upload_document     - Upload (or replace) a PDF for a work
    list_documents      - Documents owned by or shared with the user
    download_document   - Stream a readable document
    delete_document     - Delete an owned document
    request_share       - Offer an owned document to another user
    revoke_access       - Withdraw a recipient's read access

Every read path is gated by the relationship graph through the
application handlers; nothing here inspects grants directly.
"""

from collections.abc import AsyncIterator
from typing import Annotated
from uuid import UUID

from fastapi import Depends, File, Path, Query, Request, Response, UploadFile, status
from fastapi.responses import FileResponse, JSONResponse

from papershare.application.commands import (
    DeleteDocument,
    RequestShare,
    RevokeAccess,
    UploadDocument,
)
from papershare.application.commands.handlers.delete_document_handler import (
    DeleteDocumentHandler,
)
from papershare.application.commands.handlers.request_share_handler import (
    RequestShareHandler,
)
from papershare.application.commands.handlers.revoke_access_handler import (
    RevokeAccessHandler,
)
from papershare.application.commands.handlers.upload_document_handler import (
    UploadDocumentHandler,
)
from papershare.application.queries import (
    GetDocument,
    ListAccessibleDocuments,
    ListDocumentStatus,
)
from papershare.application.queries.handlers.document_query_handlers import (
    GetDocumentHandler,
    ListAccessibleDocumentsHandler,
    ListDocumentStatusHandler,
)
from papershare.core.container import (
    get_delete_document_handler,
    get_get_document_handler,
    get_list_accessible_documents_handler,
    get_list_document_status_handler,
    get_request_share_handler,
    get_revoke_access_handler,
    get_upload_document_handler,
)
from papershare.core.result import Failure
from papershare.presentation.api.middleware import get_trace_id
from papershare.presentation.routers.api.middleware import AuthenticatedUser
from papershare.presentation.routers.api.v1.errors import ErrorResponseBuilder
from papershare.schemas import (
    DocumentListResponse,
    DocumentStatusResponse,
    DocumentUploadResponse,
    ShareDocumentRequest,
    ShareRequestCreateResponse,
)

UPLOAD_CHUNK_SIZE = 64 * 1024


async def _read_chunks(file: UploadFile) -> AsyncIterator[bytes]:
    while chunk := await file.read(UPLOAD_CHUNK_SIZE):
        yield chunk


async def get_document_status(
    request: Request,
    current_user: AuthenticatedUser,
    work_ids: Annotated[
        str,
        Query(description="Comma-separated work ids", examples=["W1,W2"]),
    ] = "",
    handler: ListDocumentStatusHandler = Depends(get_list_document_status_handler),
) -> DocumentStatusResponse | JSONResponse:
    """Report which of the given works have a document the user can read.

    GET /api/v1/documents/status?work_ids=W1,W2 → 200 OK

    Works without a readable document are absent from the map.
    """
    result = await handler.handle(
        ListDocumentStatus(user_id=current_user.user_id, work_ids=work_ids.split(","))
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return DocumentStatusResponse.from_dto(result.value)


async def upload_document(
    request: Request,
    current_user: AuthenticatedUser,
    work_id: Annotated[str, Query(min_length=1, description="External work reference")],
    file: Annotated[UploadFile, File(description="PDF file")],
    work_title: Annotated[str, Query(description="Work title")] = "",
    orcid_id: Annotated[str | None, Query(description="Researcher ORCID iD")] = None,
    researcher_name: Annotated[
        str | None, Query(description="Researcher display name")
    ] = None,
    handler: UploadDocumentHandler = Depends(get_upload_document_handler),
) -> DocumentUploadResponse | JSONResponse:
    """Upload a PDF for a work.

    POST /api/v1/documents?work_id=... → 201 Created

    A second upload for the same work by the same user replaces the first.
    """
    try:
        result = await handler.handle(
            UploadDocument(
                owner_id=current_user.user_id,
                work_id=work_id,
                original_name=file.filename or "document.pdf",
                chunks=_read_chunks(file),
                work_title=work_title,
                orcid_id=orcid_id,
                researcher_name=researcher_name,
                content_type=file.content_type or "",
            )
        )
    finally:
        await file.close()

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return DocumentUploadResponse.from_dto(result.value)


async def list_documents(
    request: Request,
    current_user: AuthenticatedUser,
    handler: ListAccessibleDocumentsHandler = Depends(
        get_list_accessible_documents_handler
    ),
) -> DocumentListResponse | JSONResponse:
    """List documents the user owns or has been granted, graph-filtered.

    GET /api/v1/documents → 200 OK
    """
    result = await handler.handle(
        ListAccessibleDocuments(user_id=current_user.user_id, user_email=current_user.email)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return DocumentListResponse.from_dto(result.value)


async def download_document(
    request: Request,
    current_user: AuthenticatedUser,
    document_id: Annotated[UUID, Path(description="Document UUID")],
    handler: GetDocumentHandler = Depends(get_get_document_handler),
) -> Response:
    """Stream a document the user is allowed to read.

    GET /api/v1/documents/{document_id} → 200 OK (application/pdf)
    """
    result = await handler.handle(
        GetDocument(
            user_id=current_user.user_id,
            user_email=current_user.email,
            document_id=document_id,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    download = result.value
    return FileResponse(
        download.path,
        media_type="application/pdf",
        filename=download.document.original_name,
        content_disposition_type="inline",
    )


async def delete_document(
    request: Request,
    current_user: AuthenticatedUser,
    document_id: Annotated[UUID, Path(description="Document UUID")],
    handler: DeleteDocumentHandler = Depends(get_delete_document_handler),
) -> Response:
    """Delete an owned document.

    DELETE /api/v1/documents/{document_id} → 204 No Content
    """
    result = await handler.handle(
        DeleteDocument(user_id=current_user.user_id, document_id=document_id)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def request_share(
    request: Request,
    current_user: AuthenticatedUser,
    document_id: Annotated[UUID, Path(description="Document UUID")],
    data: ShareDocumentRequest,
    handler: RequestShareHandler = Depends(get_request_share_handler),
) -> ShareRequestCreateResponse | JSONResponse:
    """Offer an owned document to another user by email.

    POST /api/v1/documents/{document_id}/share-requests → 201 Created

    No access is granted until the recipient accepts.
    """
    result = await handler.handle(
        RequestShare(
            user_id=current_user.user_id,
            document_id=document_id,
            target_email=str(data.target_email),
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return ShareRequestCreateResponse.from_entity(result.value)


async def revoke_access(
    request: Request,
    current_user: AuthenticatedUser,
    document_id: Annotated[UUID, Path(description="Document UUID")],
    user_id: Annotated[UUID, Path(description="Recipient user UUID")],
    handler: RevokeAccessHandler = Depends(get_revoke_access_handler),
) -> Response:
    """Withdraw a recipient's access to an owned document.

    DELETE /api/v1/documents/{document_id}/grants/{user_id} → 204 No Content
    """
    result = await handler.handle(
        RevokeAccess(
            user_id=current_user.user_id,
            document_id=document_id,
            grantee_id=user_id,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=result.error,
            request=request,
            trace_id=get_trace_id() or "",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
