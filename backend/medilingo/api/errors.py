"""
API Error Responses
"""

from fastapi.responses import JSONResponse

from ..cross_cutting.error_handling import error_payload, status_code_for


def domain_error_response(error: Exception, summary: str) -> JSONResponse:
    """JSON error response with the status code the error maps to."""
    return JSONResponse(
        status_code=status_code_for(error),
        content=error_payload(error, summary),
    )


def missing_field_response(message: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": message})
