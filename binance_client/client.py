import asyncio
import copy
import json
from functools import lru_cache
from typing import Any, Optional

import aiohttp
from pydantic import TypeAdapter, ValidationError
from yarl import URL

from .errors import ApiError, DecodeError, MissingCredentials, NetworkError
from .logging_setup import logger
from .signer import Params, build_signed_request, signed_query

API_KEY_HEADER = "X-MBX-APIKEY"


@lru_cache(maxsize=None)
def _adapter(model) -> TypeAdapter:
    return TypeAdapter(model)


class _ConnectionPool:
    """Lazily created aiohttp session, shared by a client and its clones."""

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        self._session = session
        self._owned = session is None

    def session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owned = True
        return self._session

    async def close(self) -> None:
        if self._session is not None and self._owned and not self._session.closed:
            await self._session.close()
        self._session = None


class Client:
    """Async REST transport with Binance-style query signing.

    Features:
    - ``X-MBX-APIKEY`` header whenever an API key is configured, signed or not.
    - HMAC-SHA256 signature appended as the last query parameter.
    - ``{"code", "msg"}`` error bodies mapped to ``ApiError``.
    - Optional pydantic validation of the response into the caller's model.

    Notes:
    - No retries or backoff; a failed call surfaces immediately.
    - ``clone()`` is cheap: clones share the connection pool and nothing else.

    Usage:
        async with Client(api_key, secret_key, "https://fapi.binance.com") as client:
            server_time = await client.get("/fapi/v1/time")
    """

    def __init__(self, api_key: Optional[str], secret_key: Optional[str], host: str, timeout: int = 10, *, session: Optional[aiohttp.ClientSession] = None):
        self.api_key = api_key
        self.secret_key = secret_key
        self.host = host.rstrip("/")
        self.timeout = timeout
        self._pool = _ConnectionPool(session)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def clone(self, host: Optional[str] = None) -> "Client":
        other = copy.copy(self)
        if host:
            other.host = host.rstrip("/")
        return other

    async def close(self) -> None:
        await self._pool.close()

    def _headers(self, require_api_key: bool) -> dict:
        if self.api_key:
            return {API_KEY_HEADER: self.api_key}
        if require_api_key:
            raise MissingCredentials("API key is required for this endpoint")
        return {}

    async def request(self, method: str, path: str, query: Optional[str] = None, *, signed: bool = False, body: Optional[dict] = None, model: Any = None, require_api_key: bool = False):
        """Send one request and return the decoded body.

        For signed calls ``query`` must already hold the canonical string
        (see ``build_signed_request``); the signature is appended here.
        """
        if signed:
            if not query:
                query = build_signed_request(None, 0)
            query = signed_query(query, self.secret_key)
        headers = self._headers(require_api_key or signed)

        url = f"{self.host}{path}"
        if query:
            url = f"{url}?{query}"

        logger.debug(f"{method} {path} signed={signed}")
        try:
            async with self._pool.session().request(method, URL(url, encoded=True), headers=headers, data=body, timeout=aiohttp.ClientTimeout(total=self.timeout)) as resp:
                status = resp.status
                text = await resp.text()
        except asyncio.TimeoutError as e:
            logger.error(f"{method} {path} timed out after {self.timeout}s")
            raise NetworkError(f"Request timeout: {e}") from e
        except aiohttp.ClientError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise NetworkError(f"Request failed: {e}") from e

        return self._handle_response(status, text, model)

    @staticmethod
    def _api_error(status: int, text: str) -> ApiError:
        try:
            payload = json.loads(text)
        except ValueError:
            payload = None
        if isinstance(payload, dict) and "msg" in payload:
            code = payload.get("code")
            if isinstance(code, int) and not isinstance(code, bool):
                return ApiError(status, code, str(payload["msg"]))
        return ApiError(status, None, text[:200])

    def _handle_response(self, status: int, text: str, model: Any = None):
        payload_size = len(text.encode("utf-8"))
        if not (200 <= status < 300):
            error = self._api_error(status, text)
            logger.warning(f"API error | status={error.status} code={error.code} msg={error.msg}")
            raise error

        if not text:
            data = {}
        else:
            try:
                data = json.loads(text)
            except ValueError as e:
                raise DecodeError(f"Response is not valid JSON: {e.msg}", payload_size) from None

        if model is None:
            return data
        try:
            return _adapter(model).validate_python(data)
        except ValidationError as e:
            name = getattr(model, "__name__", str(model))
            raise DecodeError(f"Response does not match {name}: {e.error_count()} validation error(s)", payload_size) from None

    async def get(self, path: str, query: Optional[str] = None, model: Any = None):
        return await self.request("GET", path, query, model=model)

    async def post(self, path: str, query: Optional[str] = None, model: Any = None, require_api_key: bool = False):
        return await self.request("POST", path, query, model=model, require_api_key=require_api_key)

    async def put(self, path: str, query: Optional[str] = None, model: Any = None, require_api_key: bool = False):
        return await self.request("PUT", path, query, model=model, require_api_key=require_api_key)

    async def delete(self, path: str, query: Optional[str] = None, model: Any = None, require_api_key: bool = False):
        return await self.request("DELETE", path, query, model=model, require_api_key=require_api_key)

    async def get_signed(self, path: str, query: str, model: Any = None):
        return await self.request("GET", path, query, signed=True, model=model)

    async def post_signed(self, path: str, query: str, model: Any = None):
        return await self.request("POST", path, query, signed=True, model=model)

    async def delete_signed(self, path: str, query: str, model: Any = None):
        return await self.request("DELETE", path, query, signed=True, model=model)

    async def get_signed_p(self, path: str, params: Optional[Params], recv_window: int, model: Any = None):
        return await self.get_signed(path, build_signed_request(params, recv_window), model=model)

    async def post_signed_p(self, path: str, params: Optional[Params], recv_window: int, model: Any = None):
        return await self.post_signed(path, build_signed_request(params, recv_window), model=model)

    async def delete_signed_p(self, path: str, params: Optional[Params], recv_window: int, model: Any = None):
        return await self.delete_signed(path, build_signed_request(params, recv_window), model=model)
