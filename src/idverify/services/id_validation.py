"""IdValidationService: local validation and remote verification with telemetry."""

from __future__ import annotations

from idverify.core.protocols import IHomeAffairsClient
from idverify.core.types import IdNumber
from idverify.models.home_affairs import HomeAffairsResponse
from idverify.models.identity import ValidationResult
from idverify.telemetry.recorder import TelemetryRecorder
from idverify.validator.sa_id import validate_sa_id


class IdValidationService:
    """Entry point used by the API and CLI.

    Local validation and the Home Affairs calls are independent: the remote
    call is made whatever the local result, with the same raw input.
    """

    def __init__(
        self,
        *,
        home_affairs: IHomeAffairsClient,
        telemetry: TelemetryRecorder,
    ) -> None:
        self._home_affairs = home_affairs
        self._telemetry = telemetry

    @property
    def telemetry(self) -> TelemetryRecorder:
        return self._telemetry

    def validate_locally(self, id_number: IdNumber) -> ValidationResult:
        self._telemetry.track_feature_usage("localValidation")
        with self._telemetry.timed("idValidation"):
            return validate_sa_id(id_number)

    async def validate_with_api(self, id_number: IdNumber) -> HomeAffairsResponse:
        self._telemetry.track_feature_usage("apiValidation")
        with self._telemetry.timed("apiValidation"):
            response = await self._home_affairs.verify_id_number(id_number)
        self._track_failure(response, "apiValidation")
        return response

    async def get_person_details(self, id_number: IdNumber) -> HomeAffairsResponse:
        self._telemetry.track_feature_usage("getPersonDetails")
        with self._telemetry.timed("getPersonDetails"):
            response = await self._home_affairs.get_person_details(id_number)
        self._track_failure(response, "getPersonDetails")
        return response

    def _track_failure(self, response: HomeAffairsResponse, operation: str) -> None:
        if not response.ok:
            self._telemetry.track_error(
                response.message or "Unknown error occurred",
                {"operation": operation},
            )
