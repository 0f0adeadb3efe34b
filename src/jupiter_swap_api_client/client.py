"""Async client for the Jupiter swap API.

API docs: https://station.jup.ag/docs/apis/swap-api
"""

import logging
from typing import Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from jupiter_swap_api_client.config import Settings, get_settings
from jupiter_swap_api_client.errors import DeserializationError, RequestFailedError
from jupiter_swap_api_client.models.quote import InternalQuoteRequest, QuoteRequest, QuoteResponse
from jupiter_swap_api_client.models.swap import (
    SwapInstructionsResponse,
    SwapInstructionsResponseInternal,
    SwapRequest,
    SwapResponse,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


async def check_is_success(response: httpx.Response) -> httpx.Response:
    """Raise RequestFailedError for any non-2xx response.

    The body is read as plain text; if reading it fails the error carries
    an empty body instead.
    """
    if not response.is_success:
        try:
            await response.aread()
            body = response.text
        except (httpx.HTTPError, httpx.StreamError):
            body = ""
        logger.warning(f"Jupiter API error: {response.status_code} - {body}")
        raise RequestFailedError(response.status_code, body)
    return response


async def check_status_code_and_deserialize(response: httpx.Response, model: type[ModelT]) -> ModelT:
    """Check the status, then decode the body into ``model``."""
    response = await check_is_success(response)
    try:
        content = await response.aread()
        return model.model_validate_json(content)
    except (httpx.HTTPError, httpx.StreamError, ValidationError) as e:
        logger.warning(f"Could not decode {model.__name__} from {response.url}: {e}")
        raise DeserializationError(e) from e


class JupiterSwapApiClient:
    """Client for the quote, swap and swap-instructions endpoints.

    The underlying ``httpx.AsyncClient`` is shared by every call and is safe
    to use from concurrent tasks. Pass ``http_client`` to reuse an existing
    transport; it is then left open by :meth:`aclose`.
    """

    def __init__(
        self,
        base_path: str,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
        http2: bool = True,
    ):
        """Initialize the client.

        Args:
            base_path: API base URL, e.g. https://quote-api.jup.ag/v6
            http_client: Optional transport to use instead of building one
            timeout: Request timeout in seconds for the built transport
            http2: Negotiate HTTP/2 on the built transport
        """
        self.base_path = base_path
        self.quote_path = f"{base_path}/quote"
        self.swap_path = f"{base_path}/swap"
        self.swap_instructions_path = f"{base_path}/swap-instructions"

        self._owns_http_client = http_client is None
        if http_client is None:
            # Idle connections are kept open indefinitely
            http_client = httpx.AsyncClient(
                http2=http2,
                timeout=timeout,
                limits=httpx.Limits(keepalive_expiry=None),
                headers={"Accept": "application/json"},
            )
        self.http_client = http_client

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "JupiterSwapApiClient":
        """Create a client from application settings."""
        settings = settings or get_settings()
        return cls(
            settings.jupiter_api_url,
            http_client=http_client,
            timeout=settings.jupiter_request_timeout,
            http2=settings.jupiter_http2,
        )

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "JupiterSwapApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_path={self.base_path!r})"

    async def _send(self, method: str, url: str, model: type[ModelT], **kwargs) -> ModelT:
        logger.debug(f"{method} {url}")
        try:
            request = self.http_client.build_request(method, url, **kwargs)
            response = await self.http_client.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Jupiter request to {url} failed: {e}")
            raise DeserializationError(e) from e

        try:
            return await check_status_code_and_deserialize(response, model)
        finally:
            await response.aclose()

    async def quote(self, quote_request: QuoteRequest) -> QuoteResponse:
        """Get a quote.

        ``quote_request.quote_args`` is sent as extra query parameters after
        the regular quote fields. The request object itself is not modified.

        Raises:
            RequestFailedError: The API returned a non-2xx status
            DeserializationError: Transport failure or malformed response
        """
        extra_args = quote_request.quote_args
        internal_quote_request = InternalQuoteRequest.from_quote_request(quote_request)

        params = internal_quote_request.to_query_params()
        if extra_args:
            params.extend(extra_args.items())

        return await self._send("GET", self.quote_path, QuoteResponse, params=params)

    async def swap(
        self,
        swap_request: SwapRequest,
        extra_args: Optional[dict[str, str]] = None,
    ) -> SwapResponse:
        """Get a serialized swap transaction for a quote.

        Args:
            swap_request: User key, quote and transaction options
            extra_args: Extra query parameters passed through verbatim

        Raises:
            RequestFailedError: The API returned a non-2xx status
            DeserializationError: Transport failure or malformed response
        """
        return await self._send(
            "POST",
            self.swap_path,
            SwapResponse,
            params=extra_args,
            json=swap_request.to_wire(),
        )

    async def swap_instructions(self, swap_request: SwapRequest) -> SwapInstructionsResponse:
        """Get the individual instructions making up a swap.

        Raises:
            RequestFailedError: The API returned a non-2xx status
            DeserializationError: Transport failure or malformed response
        """
        # TODO: accept extra_args like swap() once the API confirms it honours them here
        internal = await self._send(
            "POST",
            self.swap_instructions_path,
            SwapInstructionsResponseInternal,
            json=swap_request.to_wire(),
        )
        return SwapInstructionsResponse.from_internal(internal)
