"""
Single-request catalog client.

Each call performs one GET against the catalog and turns the outcome into
either a RemotePage or a FetchError subclass. No retries, no state kept
between calls.
"""

import asyncio
import logging

import requests
from pydantic import ValidationError

from movie_explorer.config import CatalogConfig
from movie_explorer.core.errors import HttpError, NetworkError, ParseError
from movie_explorer.models.movie import CatalogEnvelope, RemotePage
from movie_explorer.models.query import QueryDescriptor

logger = logging.getLogger(__name__)


class FetchExecutor:
    """
    Executes query descriptors against the remote catalog.

    Usage:
        executor = FetchExecutor(load_catalog_config())
        page = await executor.execute(build(Intent()))
    """

    def __init__(self, config: CatalogConfig):
        self.config = config

    def build_request(self, descriptor: QueryDescriptor) -> tuple[str, dict[str, str], dict[str, str]]:
        """Return (url, params, headers) for a descriptor."""
        url = f"{self.config.base_url}/{descriptor.endpoint.value}"
        params = descriptor.wire_params()
        if self.config.api_key:
            params["api_key"] = self.config.api_key
        headers = {"Accept": "application/json"}
        if self.config.access_token:
            headers["Authorization"] = f"Bearer {self.config.access_token}"
        return url, params, headers

    async def execute(self, descriptor: QueryDescriptor) -> RemotePage:
        """
        Fetch one page.

        Args:
            descriptor: Query to run

        Returns:
            RemotePage; empty items when the catalog has no results

        Raises:
            NetworkError: no response received
            HttpError: non-2xx status
            ParseError: body is not a valid catalog envelope
        """
        url, params, headers = self.build_request(descriptor)
        logger.debug("GET %s page=%d", url, descriptor.page)

        try:
            response = await asyncio.to_thread(
                requests.get,
                url,
                params=params,
                headers=headers,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise HttpError(response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            raise ParseError(f"Response body is not JSON: {e}") from e

        if not isinstance(body, dict):
            raise ParseError(f"Expected a JSON object, got {type(body).__name__}")

        try:
            envelope = CatalogEnvelope.model_validate(body)
        except ValidationError as e:
            raise ParseError(f"Malformed catalog envelope: {e}") from e

        return envelope.to_page(descriptor.page)
