# api/utils/errors.py
from fastapi import HTTPException, status
from typing import Optional
import logging
import traceback

logger = logging.getLogger("solar_mounting.api")

class APIError(Exception):
    """
    Base class for API-specific exceptions.
    
    Carries an HTTP status code and structured error details for responses.
    """
    def __init__(
        self, 
        status_code: int, 
        detail: str, 
        internal_code: Optional[str] = None
    ):
        """
        Initialize the APIError with HTTP status and details.
        
        Args:
            status_code: HTTP status code to return
            detail: Human-readable error message
            internal_code: Optional internal error code for client reference
        """
        self.status_code = status_code
        self.detail = detail
        self.internal_code = internal_code
        super().__init__(detail)
    
    def to_http_exception(self) -> HTTPException:
        """Convert to FastAPI HTTPException."""
        error_response = {
            "detail": self.detail,
        }
        
        if self.internal_code:
            error_response["code"] = self.internal_code
            
        return HTTPException(
            status_code=self.status_code,
            detail=error_response
        )

class ValidationError(APIError):
    """Error raised for input or configuration validation failures."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Validation error: {detail}",
            internal_code="validation_error"
        )

def handle_exception(e: Exception) -> HTTPException:
    """
    Convert an exception raised while serving a request to an HTTPException.
    
    APIError and HTTPException pass through; anything else becomes a 500.
    """
    if isinstance(e, APIError):
        return e.to_http_exception()
        
    if isinstance(e, HTTPException):
        return e
        
    error_detail = traceback.format_exc()
    logger.error(f"Unhandled exception: {str(e)}\n{error_detail}")
    
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={
            "detail": f"An unexpected error occurred: {str(e)}",
            "code": "internal_server_error",
        }
    )
