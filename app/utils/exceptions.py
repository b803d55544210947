"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for the outcomes the
request layer surfaces to clients: missing resource, invalid input and
internal failure. Store details never appear in the response detail.

Usage:
    from app.utils.exceptions import NotFoundError, BadRequestError
    raise NotFoundError("Movie not found")
    raise BadRequestError("Invalid ID")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested movie does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when a path or query parameter is malformed
    (e.g. non-numeric movie id or genre filter).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class InternalServerError(HTTPException):
    """500 Internal Server Error 예외 — 저장소 실패 시 사용.

    500 Internal Server Error exception.
    Raised when the store fails; the detail is always generic.

    Args:
        detail: 오류 메시지 (Error message, default: "Internal server error")
    """

    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
