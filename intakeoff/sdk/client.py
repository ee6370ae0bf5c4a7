from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Mapping, Optional, Union

import requests

from ..core.exceptions import APIConnectionError, APIRequestError, SDKError
from ..core.interfaces.config_service import IConfigurationService
from .models import Patient, PatientCreate, PatientUpdate

logger = logging.getLogger("intakeoff")

__all__ = ["IntakeOffClient"]

DEFAULT_BASE_URL = "http://localhost:3001"


class IntakeOffClient:  # noqa: D401
    """Async wrapper around blocking HTTP calls to the IntakeOff API.

    Each call is a single request: there is no retry, pooling or backoff.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: Optional[str] = None,
        timeout: float = 30,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: IConfigurationService) -> "IntakeOffClient":
        return cls(
            base_url=config.require("api_base_url"),
            api_key=config.get("api_key"),
            timeout=config.get("request_timeout", 30),
        )

    # ------------------------------------------------------------------
    def _headers(self, extra: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        if extra:
            headers.update(extra)
        return headers

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        json: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        expect_body: bool = True,
    ) -> Any:
        url = f"{self.base_url}{endpoint}"

        def _sync_request():
            try:
                resp = requests.request(
                    method, url, json=json, headers=self._headers(headers), timeout=self.timeout
                )
            except requests.RequestException as exc:
                raise APIConnectionError(
                    f"Request to {url} failed: {exc}", context={"url": url, "method": method}
                ) from exc

            if not resp.ok:
                logger.warning("%s %s -> %d", method, url, resp.status_code)
                raise APIRequestError(resp.status_code, url=url)
            if not expect_body:
                return None
            try:
                return resp.json()
            except ValueError as exc:
                raise SDKError(
                    f"Response from {url} is not valid JSON",
                    error_code="invalid_body",
                    context={"url": url, "method": method, "status_code": resp.status_code},
                ) from exc

        logger.debug("%s %s", method, url)
        return await asyncio.to_thread(_sync_request)

    # ------------------------------------------------------------------
    # Patient methods
    # ------------------------------------------------------------------
    async def get_patients(self) -> List[Patient]:
        data = await self._request("GET", "/api/patients")
        return [Patient.model_validate(item) for item in data["patients"]]

    async def get_patient(self, patient_id: str) -> Patient:
        data = await self._request("GET", f"/api/patients/{patient_id}")
        return Patient.model_validate(data)

    async def create_patient(self, patient: Union[PatientCreate, Mapping[str, Any]]) -> Patient:
        if not isinstance(patient, PatientCreate):
            patient = PatientCreate.model_validate(patient)
        data = await self._request("POST", "/api/patients", json=patient.to_wire())
        return Patient.model_validate(data)

    async def update_patient(
        self, patient_id: str, patient: Union[PatientUpdate, Mapping[str, Any]]
    ) -> Patient:
        if not isinstance(patient, PatientUpdate):
            patient = PatientUpdate.model_validate(patient)
        data = await self._request("PUT", f"/api/patients/{patient_id}", json=patient.to_wire())
        return Patient.model_validate(data)

    async def delete_patient(self, patient_id: str) -> None:
        await self._request("DELETE", f"/api/patients/{patient_id}", expect_body=False)
