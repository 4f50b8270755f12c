"""HTTP client for the Home Affairs identity verification API."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from idverify.core.exceptions import HomeAffairsError
from idverify.models.home_affairs import HomeAffairsResponse
from idverify.validator.format_parser import strip_id_formatting

logger = logging.getLogger(__name__)


class HomeAffairsClient:
    """IHomeAffairsClient talking to the real API.

    Failures never propagate: they come back as an error envelope, the same
    shape the API uses for its own rejections.
    """

    def __init__(
        self,
        api_url: str,
        api_key: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
            "X-API-Key": self._api_key,
        }

    async def _request(self, method: str, path: str, **kwargs: Any) -> HomeAffairsResponse:
        url = f"{self._api_url}{path}"
        logger.debug("Home Affairs %s %s", method, url)
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport,
            ) as client:
                response = await client.request(method, url, headers=self._headers(), **kwargs)
        except httpx.HTTPError as exc:
            raise HomeAffairsError(f"Request to {path} failed: {exc}") from exc

        if response.is_error:
            raise HomeAffairsError(_error_message(response), status_code=response.status_code)

        try:
            return HomeAffairsResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise HomeAffairsError(
                f"Unexpected response from {path}: {exc}", status_code=response.status_code,
            ) from exc

    async def verify_id_number(self, id_number: str) -> HomeAffairsResponse:
        """Check an ID number against the Home Affairs population register."""
        sanitized = strip_id_formatting(id_number)
        try:
            return await self._request("POST", "/verify-id", json={"idNumber": sanitized})
        except HomeAffairsError as exc:
            logger.error("Home Affairs API error: %s", exc)
            return HomeAffairsResponse.error(str(exc))

    async def get_person_details(self, id_number: str) -> HomeAffairsResponse:
        """Look up the person registered under an ID number."""
        sanitized = strip_id_formatting(id_number)
        try:
            return await self._request("GET", f"/person-details/{quote(sanitized, safe='')}")
        except HomeAffairsError as exc:
            logger.error("Home Affairs API error: %s", exc)
            return HomeAffairsResponse.error(str(exc))


def _error_message(response: httpx.Response) -> str:
    try:
        message = response.json().get("message")
    except (ValueError, AttributeError):
        message = None
    return message or f"API error: {response.status_code}"
