"""Upstream error type and its HTTP mapping."""

from fastapi import Request, status
from fastapi.responses import JSONResponse


class UpstreamError(Exception):
    """Any failure reported by the media host (auth, not found, network, bad request)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @classmethod
    def from_exception(cls, exc: BaseException) -> "UpstreamError":
        """Wrap an SDK exception, keeping a non-empty message for the client."""
        return cls(str(exc) or exc.__class__.__name__)


async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    """Return 500 with body {success: false, error} for the frontend."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "error": exc.message},
    )
