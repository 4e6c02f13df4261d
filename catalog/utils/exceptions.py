"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for the catalog's error
taxonomy, so services can raise them without specifying status codes.

Usage:
    from catalog.utils.exceptions import NotFoundError, DuplicateError
    raise NotFoundError("Product not found")
    raise DuplicateError("Product already exists: Red Hoodie")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 상품을 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when no product matches the given id or slug.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 상품 생성 시도 시 사용.

    409 Conflict exception.
    Raised when creating a product whose title is already taken.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the input passes Pydantic validation but cannot be honoured
    (e.g. a title that yields an empty slug).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class InternalServerError(HTTPException):
    """500 Internal Server Error 예외 — 예기치 않은 저장소/트랜잭션 오류.

    500 Internal Server Error exception.
    Wraps any unexpected storage or transaction failure after rollback.
    The detail carries the database driver's message when one is available,
    so it may hide a genuine constraint violation (e.g. slug collision on update).

    Args:
        detail: 오류 메시지 (Error message, default: "Internal server error")
    """

    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def error_detail(exc: BaseException, default: str) -> str:
    """DB 드라이버 예외에서 상세 메시지를 추출합니다.

    Pull the driver-level ``detail`` (e.g. asyncpg's "Key (slug)=(x) already
    exists.") out of a SQLAlchemy exception chain, falling back to ``default``.
    """
    candidates = [exc, getattr(exc, "orig", None)]
    orig = getattr(exc, "orig", None)
    if orig is not None:
        candidates.append(orig.__cause__)
    for candidate in candidates:
        detail = getattr(candidate, "detail", None)
        if isinstance(detail, str) and detail:
            return detail
    return default
