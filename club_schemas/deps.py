"""
FastAPI helpers for procedures that accept form payloads.

    @router.post("/links")
    def add_link(link: AddUserLink = Depends(validated_body(SchemaId.ADD_USER_LINK))):
        ...
"""

from json import JSONDecodeError
from typing import Optional, Union

from fastapi import HTTPException, Request
from pydantic import BaseModel

from .registry import SchemaId
from .validator import ValidationResult, resolve_schema_id, validate


def raise_for_result(result: ValidationResult) -> Optional[BaseModel]:
    if not result.ok:
        raise HTTPException(
            status_code=422,
            detail=result.error_report(),
        )
    return result.value


def validated_body(schema_id: Union[SchemaId, str]):
    sid = resolve_schema_id(schema_id)

    async def dependency(request: Request) -> Optional[BaseModel]:
        body = await request.body()
        try:
            raw = await request.json() if body else None
        except (JSONDecodeError, UnicodeDecodeError):
            raise HTTPException(status_code=400, detail="Request body must be valid JSON")
        return raise_for_result(validate(sid, raw))

    return dependency
