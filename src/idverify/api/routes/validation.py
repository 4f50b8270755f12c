"""ID validation, formatting and Home Affairs verification endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request
from pydantic import BaseModel

from idverify.models.home_affairs import HomeAffairsResponse
from idverify.models.identity import ValidationResult
from idverify.services import IdValidationService
from idverify.validator.formatter import format_sa_id

router = APIRouter(tags=["validation"])


class IdNumberRequest(BaseModel):
    id_number: str


class ValidationResponse(BaseModel):
    id_number: str
    formatted: str
    result: ValidationResult


class FormatResponse(BaseModel):
    formatted: str


def _service(request: Request) -> IdValidationService:
    return request.app.state.service


@router.post("/validate", response_model=ValidationResponse)
async def validate(body: IdNumberRequest, request: Request) -> ValidationResponse:
    """Validate an ID number locally, without calling Home Affairs."""
    result = _service(request).validate_locally(body.id_number)
    return ValidationResponse(
        id_number=body.id_number,
        formatted=format_sa_id(body.id_number),
        result=result,
    )


@router.post("/format", response_model=FormatResponse)
async def format_id(body: IdNumberRequest) -> FormatResponse:
    return FormatResponse(formatted=format_sa_id(body.id_number))


@router.post("/verify", response_model=HomeAffairsResponse, response_model_by_alias=True)
async def verify(body: IdNumberRequest, request: Request) -> HomeAffairsResponse:
    return await _service(request).validate_with_api(body.id_number)


@router.get(
    "/person-details/{id_number}",
    response_model=HomeAffairsResponse,
    response_model_by_alias=True,
)
async def person_details(id_number: str, request: Request) -> HomeAffairsResponse:
    return await _service(request).get_person_details(id_number)
