"""Error type raised by the PutPut clients."""

from typing import Optional


NO_TOKEN = "NO_TOKEN"
R2_UPLOAD_FAILED = "R2_UPLOAD_FAILED"
DOWNLOAD_FAILED = "DOWNLOAD_FAILED"
UNKNOWN_ERROR = "UNKNOWN_ERROR"


class PutPutError(Exception):
    """
    Raised for any failed API call.

    Wraps the canonical error envelope ``{"error": {"code", "message", "hint"}}``.
    Client-side failures use status 0 (no request was sent) or the status of
    the direct storage transfer.
    """

    def __init__(self, status: int, code: str, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.code = code
        self.message = message
        self.hint = hint

    def __repr__(self) -> str:
        return f"PutPutError(status={self.status}, code={self.code!r}, message={self.message!r})"


def no_token_error() -> PutPutError:
    return PutPutError(
        0,
        NO_TOKEN,
        "A token is required for this operation. Pass it in the constructor or call set_token().",
    )


def transfer_failed_error(status: int) -> PutPutError:
    return PutPutError(
        status,
        R2_UPLOAD_FAILED,
        f"R2 upload failed with status {status}",
        hint="The presigned URL may have expired. Try again.",
    )
