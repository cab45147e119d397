"""
Mapping of lifecycle results to HTTP responses
"""
from fastapi import status
from fastapi.responses import JSONResponse

from app.components.contracts import ApiResponse


def envelope_response(response: ApiResponse, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    """Successful envelopes get ``success_status``, failed ones 400"""
    status_code = success_status if response.success else status.HTTP_400_BAD_REQUEST
    return JSONResponse(status_code=status_code, content=response.model_dump())
