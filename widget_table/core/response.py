"""Standardized JSON response envelope helpers."""


from typing import Generic, TypeVar

from fastapi import Request, Response, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Single-item response envelope: `{ data: {...} }`"""

    data: T

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


def redirect_back(request: Request) -> Response:
    """303 back to the page the request came from, or 204 when there is no Referer.

    Used after destroying a row from a widget table so the user lands on the
    same page (and the same widget state) they clicked from.
    """
    referer = request.headers.get("referer")
    if referer:
        return RedirectResponse(referer, status_code=status.HTTP_303_SEE_OTHER)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
