"""Home Affairs API envelope models.

Field names follow the remote camelCase wire format through aliases.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from idverify.models.identity import CitizenshipStatus, Gender


class IdDetails(BaseModel):
    """Person details returned by Home Affairs."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    birth_date: str  # ISO date, as sent by the API
    gender: Gender
    citizenship_status: CitizenshipStatus
    name: Optional[str] = None
    surname: Optional[str] = None
    is_deceased: Optional[bool] = None
    issued_date: Optional[str] = None


class HomeAffairsResponse(BaseModel):
    """Success/error envelope for verify and person-details calls."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    is_valid: bool
    status: Literal["success", "error"]
    message: Optional[str] = None
    id_details: Optional[IdDetails] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @classmethod
    def error(cls, message: str) -> HomeAffairsResponse:
        return cls(is_valid=False, status="error", message=message)
