import logging
from contextlib import contextmanager

from fastapi import status
from fastapi.exceptions import HTTPException
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

credentials_exception = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)


def not_found_exception(detail: str = 'Not Found') -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=detail,
    )


def forbidden_exception(detail: str = 'Forbidden') -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail=detail,
    )


def bad_request_exception(detail: str = 'Bad request') -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=detail,
    )


def internal_error_exception(detail: str = 'Internal server error') -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail,
    )


@contextmanager
def store_errors(db: Session, detail: str):
    """Turn any database failure into a 500 carrying only ``detail``.

    The original error is logged with its traceback and the session is rolled
    back; nothing from the driver reaches the client. Rows that do not fit the
    Animal schema count as store failures, the table is owned elsewhere.
    """
    try:
        yield
    except (SQLAlchemyError, ValidationError):
        logger.exception(detail)
        db.rollback()
        raise internal_error_exception(detail)
