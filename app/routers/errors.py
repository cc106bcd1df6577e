import logging
from fastapi import HTTPException, status

from app.exceptions import RegistryError

logger = logging.getLogger(__name__)


def to_http_error(action: str, e: Exception) -> HTTPException:
    """Map a failure raised below the router onto the API's error taxonomy."""
    if isinstance(e, HTTPException):
        return e
    if isinstance(e, RegistryError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    logger.error(f"Error in {action}: {str(e)}")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
