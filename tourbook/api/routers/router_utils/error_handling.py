"""
Service error handling utilities.

Provides a decorator for consistent error handling across API endpoints:
domain exceptions become HTTP errors, a moved slug becomes a redirect.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import IntegrityError

from tourbook.core.exceptions import (
    NotFoundError,
    SlugConflictError,
    SlugMovedError,
    TourbookException,
    ValidationError,
)
from tourbook.core.redirects import public_path

from .constants import API_PREFIX

logger = logging.getLogger(__name__)

PAGES_PREFIX = f"{API_PREFIX}/pages"

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def moved_response(error: SlugMovedError, prefix: str = PAGES_PREFIX) -> RedirectResponse:
    """
    Redirect for a renamed slug.

    Args:
        error: The raised SlugMovedError
        prefix: Mount point of the page routes, prepended to the public path

    Returns:
        RedirectResponse: 308 when permanent, 307 otherwise
    """
    status_code = (
        status.HTTP_308_PERMANENT_REDIRECT
        if error.permanent
        else status.HTTP_307_TEMPORARY_REDIRECT
    )
    return RedirectResponse(
        url=f"{prefix}{public_path(error.content_type, error.new_slug)}",
        status_code=status_code,
    )


def handle_service_errors(func: F) -> F:
    """
    Decorator to transform service exceptions into HTTP responses.

    This centralizes:
    - Logging of errors with context
    - Mapping domain exceptions to HTTP status codes
    - Turning moved slugs into redirects
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except SlugMovedError as e:
            return moved_response(e)

        except NotFoundError as e:
            logger.warning("Resource not found", extra={"error": str(e), **e.details})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except SlugConflictError as e:
            logger.warning("Slug conflict", extra={"error": str(e), **e.details})
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)

        except ValidationError as e:
            logger.warning("Invalid request", extra={"error": str(e), "field": e.details.get("field")})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except TourbookException as e:
            logger.warning("Request rejected", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except IntegrityError as e:
            logger.warning("Constraint violation", extra={"error": str(e.orig)})
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Request conflicts with existing data",
            )

        except Exception as e:
            logger.exception("Unexpected failure in request", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred",
            )

    return wrapper  # type: ignore
