"""
Translation of service responses into HTTP responses.

Bodies: 200/201 carry the payload (fields that are None are left out),
400/409 carry ``{"detail": message}``, 204/403/404 carry nothing.
"""

from typing import Optional

from fastapi import Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from pomodoro.services.response import ResponseType, ServiceResponse

_EMPTY_STATUS = {
    ResponseType.NO_CONTENT: status.HTTP_204_NO_CONTENT,
    ResponseType.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ResponseType.FORBIDDEN: status.HTTP_403_FORBIDDEN,
}

_MESSAGE_STATUS = {
    ResponseType.ERROR: status.HTTP_400_BAD_REQUEST,
    ResponseType.CONFLICT: status.HTTP_409_CONFLICT,
}


def map_service_response(response: ServiceResponse, created_location: Optional[str] = None) -> Response:
    """
    Build the HTTP response for a service result.

    Args:
        response: Result returned by a service operation
        created_location: URL of a newly created record; turns OK into
            201 Created with a ``Location`` header

    Returns:
        Response ready to be returned from a route
    """
    if response.result is ResponseType.OK:
        content = jsonable_encoder(response.data, exclude_none=True)
        if created_location is not None:
            return JSONResponse(
                status_code=status.HTTP_201_CREATED,
                content=content,
                headers={"Location": created_location},
            )
        return JSONResponse(status_code=status.HTTP_200_OK, content=content)

    if response.result in _EMPTY_STATUS:
        return Response(status_code=_EMPTY_STATUS[response.result])

    if response.result in _MESSAGE_STATUS:
        return JSONResponse(
            status_code=_MESSAGE_STATUS[response.result],
            content={"detail": response.message},
        )

    return Response(status_code=status.HTTP_400_BAD_REQUEST)
