"""Mock Home Affairs client for local development and testing.

Returns canned responses. No network calls.
"""

from __future__ import annotations

import asyncio

from idverify.models.home_affairs import HomeAffairsResponse, IdDetails
from idverify.models.identity import CitizenshipStatus, Gender
from idverify.validator.format_parser import strip_id_formatting

_VERIFY_RESPONSE = HomeAffairsResponse(
    is_valid=True,
    status="success",
    message="ID number validation successful (MOCK)",
    id_details=IdDetails(
        birth_date="1990-01-08",
        gender=Gender.MALE,
        citizenship_status=CitizenshipStatus.CITIZEN,
    ),
)

_DETAILS_RESPONSE = HomeAffairsResponse(
    is_valid=True,
    status="success",
    message="Person details retrieved successfully (MOCK)",
    id_details=IdDetails(
        name="John",
        surname="Doe",
        birth_date="1990-01-08",
        gender=Gender.MALE,
        citizenship_status=CitizenshipStatus.CITIZEN,
        is_deceased=False,
        issued_date="2010-05-15",
    ),
)


class MockHomeAffairsClient:
    """IHomeAffairsClient returning deterministic mock envelopes."""

    def __init__(self, latency: float = 0.0) -> None:
        self._latency = latency
        self._canned_responses: dict[str, HomeAffairsResponse] = {}

    def set_response(self, id_number: str, response: HomeAffairsResponse) -> None:
        """Register a canned response for one ID number (both operations)."""
        self._canned_responses[strip_id_formatting(id_number)] = response

    async def _respond(self, id_number: str, default: HomeAffairsResponse) -> HomeAffairsResponse:
        if self._latency > 0:
            await asyncio.sleep(self._latency)
        canned = self._canned_responses.get(strip_id_formatting(id_number))
        return (canned or default).model_copy(deep=True)

    async def verify_id_number(self, id_number: str) -> HomeAffairsResponse:
        return await self._respond(id_number, _VERIFY_RESPONSE)

    async def get_person_details(self, id_number: str) -> HomeAffairsResponse:
        return await self._respond(id_number, _DETAILS_RESPONSE)
