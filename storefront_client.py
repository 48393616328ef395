# storefront_client.py
from typing import List, Optional, Dict, Any

import requests
from pydantic import TypeAdapter, ValidationError

import schemas
from config import settings

PRODUCT_LISTINGS_PATH = "/customer/getProductListings"
LOGIN_PATH = "/auth/login"

_PRODUCT_LIST = TypeAdapter(List[schemas.Product])


class StorefrontError(Exception):
    """Base class for everything the storefront client raises."""


class MissingCredentialError(StorefrontError):
    def __init__(self, message: str = "No token found"):
        super().__init__(message)


class TransportError(StorefrontError):
    """The request never produced an HTTP response."""


class ServerError(StorefrontError):
    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP {status_code} {reason}".strip())


class MalformedResponseError(StorefrontError):
    """A 2xx response whose body is not a list of products."""


class AuthenticationError(StorefrontError):
    pass


class StorefrontClient:
    """
    Thin client for the farm-to-table backend. Every call is a single attempt:
    no retries and no backoff.
    """
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        base_url = base_url or settings.backend_url
        if not base_url:
            raise ValueError("Backend URL is required.")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _headers(self, token: Optional[str] = None) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _request(self, method: str, path: str, token: Optional[str] = None, payload: Optional[Dict[str, Any]] = None) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            return requests.request(method, url, headers=self._headers(token), json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

    def get_product_listings(self, token: Optional[str]) -> List[schemas.Product]:
        """
        GET /customer/getProductListings with a bearer token.

        Raises MissingCredentialError without a token, TransportError on network
        failure, ServerError on a non-2xx status and MalformedResponseError when
        the body does not decode to a product list.
        """
        if not token:
            raise MissingCredentialError()

        response = self._request("GET", PRODUCT_LISTINGS_PATH, token=token)
        if not response.ok:
            raise ServerError(response.status_code, response.reason or "")

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Response body is not JSON: {e}") from e
        if not isinstance(data, list):
            raise MalformedResponseError(f"Expected a JSON array, got {type(data).__name__}")
        try:
            return _PRODUCT_LIST.validate_python(data)
        except ValidationError as e:
            raise MalformedResponseError(f"Invalid product record: {e}") from e

    def login(self, username: str, password: str) -> schemas.TokenResponse:
        """POST /auth/login; returns the token together with the account type."""
        response = self._request("POST", LOGIN_PATH, payload={"username": username, "password": password})
        if not response.ok:
            raise AuthenticationError(f"Login failed for '{username}': HTTP {response.status_code}")
        try:
            return schemas.TokenResponse.model_validate(response.json())
        except ValueError as e:
            raise MalformedResponseError(f"Login response has no token: {e}") from e
