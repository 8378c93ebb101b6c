import pytest

from binance_client.errors import UnsupportedRoute
from binance_client.routes import INVERSE_ROUTES, LINEAR_ROUTES, MarketType, Route, resolve, router


def test_ping_resolves_per_market():
    linear = resolve(MarketType.LINEAR, Route.PING)
    inverse = resolve(MarketType.INVERSE, Route.PING)
    assert linear == "/fapi/v1/ping"
    assert inverse == "/dapi/v1/ping"
    assert linear != inverse


def test_tables_use_their_own_prefix():
    assert all(path.startswith("/fapi/") for path in LINEAR_ROUTES.values())
    assert all(path.startswith("/dapi/") for path in INVERSE_ROUTES.values())


def test_linear_defines_every_route():
    for route in Route:
        assert resolve(MarketType.LINEAR, route)


def test_unsupported_route_raises():
    with pytest.raises(UnsupportedRoute) as exc_info:
        resolve(MarketType.INVERSE, Route.MULTI_ASSETS_MARGIN)
    assert exc_info.value.market_type is MarketType.INVERSE
    assert exc_info.value.route is Route.MULTI_ASSETS_MARGIN


def test_router_binds_market_type():
    resolve_inverse = router(MarketType.INVERSE)
    assert resolve_inverse(Route.ORDER) == "/dapi/v1/order"
    assert router(MarketType.LINEAR)(Route.POSITION_RISK) == "/fapi/v2/positionRisk"


def test_market_type_hosts():
    assert MarketType.LINEAR.rest_endpoint == "https://fapi.binance.com"
    assert MarketType.INVERSE.rest_endpoint == "https://dapi.binance.com"
    assert MarketType.LINEAR.ws_endpoint == "wss://fstream.binance.com"
    assert MarketType.INVERSE.ws_endpoint == "wss://dstream.binance.com"
