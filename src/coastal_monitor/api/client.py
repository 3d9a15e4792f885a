"""
HTTP transport for the ocean data service.

One pooled session per client, with retries on GET for throttling and
server errors.
"""

import logging
from typing import Dict, Any, Optional

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore

from ..core import ProviderError

RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


class APIClient:
    """Read-only JSON client bound to one base URL."""

    def __init__(
        self,
        base_url: str,
        timeout: int = 30,
        max_retries: int = 3,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize API client.

        Args:
            base_url: Service root, e.g. "https://ocean.example.org/api"
            timeout: Per-request timeout in seconds
            max_retries: Retry budget for throttled or failed GETs
            verify_ssl: Whether to verify TLS certificates
            logger: Logger instance
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.logger = logger or logging.getLogger(__name__)

        if not verify_ssl:
            import urllib3
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        self.session = self._build_session(max_retries)

    @staticmethod
    def _build_session(max_retries: int) -> requests.Session:
        session = requests.Session()
        adapter = HTTPAdapter(max_retries=Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=list(RETRY_STATUS_CODES),
            allowed_methods=["GET"]
        ))
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        session.headers.update({"Accept": "application/json"})
        return session

    def _make_request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """
        Send one request and raise on HTTP errors.

        Raises:
            requests.exceptions.RequestException: On transport or HTTP failure
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        kwargs.setdefault("verify", self.verify_ssl)
        self.logger.debug(f"{method} {url} params={kwargs.get('params')}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                timeout=self.timeout,
                **kwargs
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Request to ocean data service failed: {method} {url} - {e}")
            raise

        return response

    def get(self, endpoint: str, params: Optional[Dict] = None) -> Any:
        """
        GET an endpoint and decode its JSON body.

        Raises:
            requests.exceptions.RequestException: On transport or HTTP failure
            ProviderError: If the body is not JSON
        """
        response = self._make_request("GET", endpoint, params=params)
        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(f"Non-JSON response from {endpoint}: {e}")

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
