"""
API layer for an upstream ocean data service.

Provides a low-level HTTP client for observation retrieval.
"""

import logging
from typing import Optional

from .client import APIClient
from .observations import ObservationsAPI
from . import helpers


class OceanDataAPI(APIClient, ObservationsAPI):
    """
    Unified API client for the ocean data service.

    Combines the HTTP session with observation operations.
    """

    def __init__(
        self,
        base_url: str,
        timeout: int = 30,
        max_retries: int = 3,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize unified API client.

        Args:
            base_url: Base URL for the API
            timeout: Request timeout in seconds
            max_retries: Maximum number of retry attempts
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
        """
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            verify_ssl=verify_ssl,
            logger=logger
        )


__all__ = [
    "APIClient",
    "ObservationsAPI",
    "OceanDataAPI",
    "helpers",
]
