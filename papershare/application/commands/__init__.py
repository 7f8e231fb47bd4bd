"""Commands (CQRS write side)."""

from papershare.application.commands.document_commands import DeleteDocument, UploadDocument
from papershare.application.commands.researcher_commands import (
    LinkResearcher,
    UnlinkResearcher,
)
from papershare.application.commands.sharing_commands import (
    AcceptShareRequest,
    RejectShareRequest,
    RequestShare,
    RevokeAccess,
)
from papershare.application.commands.user_commands import InitializeUser

__all__ = [
    "AcceptShareRequest",
    "DeleteDocument",
    "InitializeUser",
    "LinkResearcher",
    "RejectShareRequest",
    "RequestShare",
    "RevokeAccess",
    "UnlinkResearcher",
    "UploadDocument",
]
