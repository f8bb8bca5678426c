"""
Base HTTP client for the common API.

Handles session management, authentication, retries, and error handling.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .. import __version__
from ..config import CommonApiConfig, get_config
from ..exceptions import (
    APIError,
    AuthenticationError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from ..utils import extract_content_disposition_filename

logger = logging.getLogger(__name__)

IDEMPOTENT_METHODS = ["HEAD", "GET", "OPTIONS", "PUT", "DELETE"]


@dataclass
class DownloadedFile:
    """A file returned by an export endpoint and kept in memory."""

    filename: Optional[str]
    mime_type: Optional[str]
    content: bytes

    def save(self, output_dir: Union[str, Path] = ".", filename: Optional[str] = None) -> Path:
        """Write the content into ``output_dir`` and return the path."""
        name = filename or self.filename or "download"
        path = Path(output_dir) / Path(name).name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.content)
        return path


def _encode_params(params: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not params:
        return None
    encoded = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        encoded[key] = value
    return encoded


class HTTPClient:
    """
    Base HTTP client for the common API.

    Handles:
    - Session management with retry logic
    - Bearer token headers
    - JSON, form and multipart bodies
    - Error response handling
    """

    def __init__(self, config: Optional[CommonApiConfig] = None):
        """
        Initialize the HTTP client.

        Args:
            config: Optional configuration. Uses global config if not provided.
        """
        self.config = config or get_config()
        self._session: Optional[requests.Session] = None

    @property
    def session(self) -> requests.Session:
        """Get or create HTTP session with retry logic."""
        if self._session is None:
            self._session = requests.Session()

            retry_strategy = Retry(
                total=self.config.max_retries,
                backoff_factor=1,
                status_forcelist=[429, 502, 503, 504],
                allowed_methods=IDEMPOTENT_METHODS,
                respect_retry_after_header=True,
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            self._session.mount("http://", adapter)
            self._session.mount("https://", adapter)

            self._session.headers.update({
                "User-Agent": f"common-api/{__version__}",
                "Accept": "application/json",
            })

        return self._session

    @property
    def base_url(self) -> str:
        """Get the base URL for API requests."""
        return self.config.base_url

    @property
    def token(self) -> str:
        return self.config.token

    @token.setter
    def token(self, value: Optional[str]) -> None:
        self.config.token = value or ""

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def _get_headers(self, extra_headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Get request headers including authentication."""
        headers = {}

        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"

        if extra_headers:
            headers.update(extra_headers)

        return headers

    def _handle_response(self, response: requests.Response) -> Any:
        """Parse a successful response or raise the matching exception."""
        logger.debug("Request: %s %s", response.request.method, response.request.url)
        logger.debug("Response: %s", response.status_code)

        if 200 <= response.status_code < 300:
            if response.status_code == 204 or not response.content:
                return None
            try:
                return response.json()
            except ValueError:
                return response.text

        try:
            error_data = response.json()
            if not isinstance(error_data, dict):
                error_data = {"message": str(error_data)}
            error_msg = self._extract_error_message(error_data)
        except ValueError:
            error_msg = response.text or f"HTTP {response.status_code}"
            error_data = {}

        logger.error(
            "API error [%s %s] status=%d: %s",
            response.request.method,
            response.request.url,
            response.status_code,
            error_msg,
        )

        if response.status_code == 401:
            raise AuthenticationError(
                "Authentication failed: " + (error_msg or "Please login again."),
                status_code=response.status_code,
                response_data=error_data,
            )
        elif response.status_code == 403:
            raise PermissionDeniedError(
                "Permission denied: " + (error_msg or "You don't have access to this resource."),
                status_code=response.status_code,
                response_data=error_data,
            )
        elif response.status_code == 404:
            raise NotFoundError(
                "Resource not found: " + (error_msg or "The requested resource does not exist."),
                status_code=response.status_code,
                response_data=error_data,
            )
        elif response.status_code in (400, 422):
            raise ValidationError(
                f"Invalid request: {error_msg}",
                status_code=response.status_code,
                response_data=error_data,
                details=str(error_data) if error_data else None,
            )
        else:
            raise APIError(
                f"API request failed: {error_msg}",
                status_code=response.status_code,
                response_data=error_data,
            )

    def _extract_error_message(self, error_data: Dict[str, Any]) -> str:
        """Extract error message from an error body."""
        message = error_data.get("message")
        code = error_data.get("code")
        if message and code:
            return f"[{code}] {message}"
        if message:
            return str(message)
        if code:
            return str(code)
        return str(error_data)

    def request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Any = None,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
        stream: bool = False,
    ) -> requests.Response:
        """
        Send a request and return the raw response.

        Args:
            method: HTTP method
            endpoint: API endpoint (relative to the base URL)
            params: Query parameters, None values dropped
            json_data: JSON body
            data: Form body
            files: Files for multipart upload
            stream: Whether to stream the response
        """
        url = self.url_for(endpoint)

        try:
            return self.session.request(
                method=method,
                url=url,
                params=_encode_params(params),
                json=json_data,
                data=data,
                files=files,
                headers=self._get_headers(),
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
                stream=stream,
            )
        except requests.exceptions.ConnectionError as e:
            raise APIError(f"Connection failed: {e}")
        except requests.exceptions.Timeout as e:
            raise APIError(f"Request timed out: {e}")
        except requests.exceptions.RequestException as e:
            raise APIError(f"Request failed: {e}")

    def call(self, method: str, endpoint: str, **kwargs: Any) -> Any:
        """Send a request and return the parsed body."""
        return self._handle_response(self.request(method, endpoint, **kwargs))

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.call("GET", endpoint, params=params)

    def post(
        self,
        endpoint: str,
        json_data: Any = None,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return self.call("POST", endpoint, params=params, json_data=json_data, data=data, files=files)

    def put(self, endpoint: str, json_data: Any = None, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.call("PUT", endpoint, params=params, json_data=json_data)

    def patch(self, endpoint: str, json_data: Any = None, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.call("PATCH", endpoint, params=params, json_data=json_data)

    def delete(self, endpoint: str, json_data: Any = None, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.call("DELETE", endpoint, params=params, json_data=json_data)

    def head(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> bool:
        """Send a HEAD request. Returns True, or raises when the record is missing."""
        self._handle_response(self.request("HEAD", endpoint, params=params))
        return True

    def download(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        mime_type: Optional[str] = None,
        auto_download: bool = False,
        output_dir: Optional[Union[str, Path]] = None,
    ) -> Optional[DownloadedFile]:
        """
        Download a file.

        Args:
            endpoint: API endpoint
            params: Query parameters
            mime_type: Expected MIME type, sent as the Accept header
            auto_download: Save the file into the download directory and
                return None instead of returning its content
            output_dir: Directory used when ``auto_download`` is set

        Returns:
            The downloaded file, or None when it was saved or the server
            answered 204 No Content
        """
        url = self.url_for(endpoint)
        headers = self._get_headers({"Accept": mime_type} if mime_type else None)

        try:
            response = self.session.get(
                url,
                params=_encode_params(params),
                headers=headers,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
                stream=True,
            )
        except requests.exceptions.RequestException as e:
            raise APIError(f"Download failed: {e}")

        if not 200 <= response.status_code < 300:
            self._handle_response(response)
        if response.status_code == 204:
            logger.info("No file returned by %s", endpoint)
            return None

        filename = extract_content_disposition_filename(response.headers.get("Content-Disposition"))
        result = DownloadedFile(
            filename=filename,
            mime_type=response.headers.get("Content-Type", mime_type),
            content=response.content,
        )
        if not auto_download:
            return result

        target_dir = output_dir or self.config.download_dir or "."
        path = result.save(target_dir)
        logger.info("Saved %s", path)
        return None

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
