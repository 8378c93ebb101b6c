from .api import FuturesApi
from .rest_models import Success, UserDataStream
from .routes import Route
from .signer import build_request


class UserStream(FuturesApi):
    """Listen keys for the user data stream.

    These calls are not signed but need the API key header. A key expires
    after 60 minutes unless ``keep_alive`` is called.
    """

    async def start(self) -> UserDataStream:
        return await self.client.post(self.get_api(Route.USER_DATA_STREAM), model=UserDataStream, require_api_key=True)

    async def keep_alive(self, listen_key: str) -> Success:
        query = build_request([("listenKey", listen_key)])
        return await self.client.put(self.get_api(Route.USER_DATA_STREAM), query, model=Success, require_api_key=True)

    async def close(self, listen_key: str) -> Success:
        query = build_request([("listenKey", listen_key)])
        return await self.client.delete(self.get_api(Route.USER_DATA_STREAM), query, model=Success, require_api_key=True)
