"""Request Parameters — GET+POST snapshot used when no explicit record is given.

Invariants:
    - Query string first, then form body, in arrival order
    - A key seen once maps to its str value; a repeated key maps to a list of str
    - File uploads are not parameters and are skipped
    - The body is only parsed for urlencoded / multipart requests
"""

from typing import Iterable

from fastapi import Request

from fieldguard.core.domain_types import FieldName, FieldValue

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def group_params(items: Iterable[tuple[str, str]]) -> dict[FieldName, FieldValue]:
    params: dict[FieldName, FieldValue] = {}
    for key, value in items:
        if key not in params:
            params[key] = value
        elif isinstance(params[key], list):
            params[key].append(value)
        else:
            params[key] = [params[key], value]
    return params


async def collect_params(request: Request) -> dict[FieldName, FieldValue]:
    items = list(request.query_params.multi_items())
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        items.extend(
            (key, value) for key, value in form.multi_items()
            if isinstance(value, str)
        )
    return group_params(items)
