"""
Gist API response classification.

The API answers with a JSON object. A successful upload carries html_url;
anything else is a failure described by message and an optional errors list:

    {"message": "Validation Failed",
     "errors": [{"resource": "Gist", "code": "missing_field", "field": "files"}]}
"""

from __future__ import annotations

import json
from typing import Literal

from gister.exceptions import ProtocolError
from gister.schemas.types import StrictModel


class FieldError(StrictModel):
    """One key/value pair from one mapping of the errors list."""

    index: int  # Position of the mapping within errors
    field: str
    detail: str

    def __str__(self) -> str:
        return f'{self.index} {self.field}: {self.detail}'


class GistCreated(StrictModel):
    """Upload accepted; url is the gist's web page."""

    kind: Literal['created'] = 'created'
    url: str
    gist_id: str | None = None


class GistFailure(StrictModel):
    """Upload rejected by the API."""

    kind: Literal['failure'] = 'failure'
    message: str
    field_errors: tuple[FieldError, ...] = ()


GistResponse = GistCreated | GistFailure


def _detail_text(value: object) -> str:
    return value if isinstance(value, str) else json.dumps(value)


def classify_response(body: object) -> GistResponse:
    """
    Classify a decoded response body.

    Args:
        body: Decoded JSON value

    Returns:
        GistCreated if html_url is present, GistFailure otherwise

    Raises:
        ProtocolError: If body is not an object, or html_url/errors have the wrong shape
    """
    if not isinstance(body, dict):
        raise ProtocolError(f'Expected a JSON object in the response, got {type(body).__name__}')

    if 'html_url' in body:
        url = body['html_url']
        if not isinstance(url, str):
            raise ProtocolError(f'html_url must be a string, got {type(url).__name__}')
        gist_id = body.get('id')
        return GistCreated(url=url, gist_id=gist_id if isinstance(gist_id, str) else None)

    message = body.get('message')
    errors = body.get('errors') or []
    if not isinstance(errors, list):
        raise ProtocolError(f'errors must be a list, got {type(errors).__name__}')

    field_errors: list[FieldError] = []
    for index, item in enumerate(errors):
        if not isinstance(item, dict):
            raise ProtocolError(f'errors[{index}] must be an object, got {type(item).__name__}')
        field_errors.extend(
            FieldError(index=index, field=str(key), detail=_detail_text(value)) for key, value in item.items()
        )

    return GistFailure(
        message='' if message is None else _detail_text(message),
        field_errors=tuple(field_errors),
    )
