"""Shared HTTP plumbing for the classroom backend clients."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from classroom_tutor.constants.api_constants import DEFAULT_API_BASE_URL, DEFAULT_REQUEST_TIMEOUT_SECONDS
from classroom_tutor.core.credentials import CredentialsProvider, StaticCredentials
from classroom_tutor.core.errors import ApiResponseError, NetworkError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class BackendClient:
    """Sends authenticated JSON requests and maps failures to NetworkError.

    Clients never substitute local data for a failed request; deciding whether
    offline content is acceptable is left to the caller.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        credentials: CredentialsProvider | None = None,
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._credentials = credentials or StaticCredentials()
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.Client(base_url=base_url.rstrip("/"), timeout=timeout)

    @property
    def base_url(self) -> str:
        return str(self._http.base_url).rstrip("/")

    def close(self) -> None:
        if self._owns_http_client:
            self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(self, method: str, path: str, *, json: Any = None) -> Any:
        headers = {"Authorization": f"Bearer {self._credentials.get_token()}"}
        try:
            response = self._http.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise NetworkError(f"Request to {path} failed: {exc}", url=path) from exc

        if response.is_error:
            logger.warning("%s %s returned HTTP %s", method, path, response.status_code)
            raise NetworkError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
                url=path,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise ApiResponseError(f"Response from {path} is not valid JSON.", url=path) from exc

    def _get(self, path: str, model: type[ModelT]) -> ModelT:
        return self._parse(model, self._request("GET", path), path)

    def _send(self, method: str, path: str, payload: Any, model: type[ModelT]) -> ModelT:
        return self._parse(model, self._request(method, path, json=payload), path)

    @staticmethod
    def _parse(model: type[ModelT], payload: Any, path: str) -> ModelT:
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            logger.warning("Unexpected response shape from %s: %s", path, exc)
            raise ApiResponseError(
                f"Response from {path} does not match {model.__name__}.", url=path
            ) from exc
