"""Signed account and trading endpoints."""
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Tuple, Union

from .api import FuturesApi
from .rest_models import (
    AccountBalance,
    CanceledOrder,
    ChangeLeverageResponse,
    OrderSide,
    OrderType,
    Position,
    PositionSide,
    TimeInForce,
    Transaction,
    WorkingType,
)
from .routes import Route
from .signer import bool_to_string

Number = Union[Decimal, float, int]


@dataclass
class OrderRequest:
    """Fields of a new order. Unset fields are not sent."""
    symbol: str
    side: OrderSide
    order_type: OrderType
    position_side: Optional[PositionSide] = None
    time_in_force: Optional[TimeInForce] = None
    quantity: Optional[Number] = None
    reduce_only: Optional[bool] = None
    price: Optional[Number] = None
    stop_price: Optional[Number] = None
    close_position: Optional[bool] = None
    activation_price: Optional[Number] = None
    callback_rate: Optional[Number] = None
    working_type: Optional[WorkingType] = None
    price_protect: Optional[bool] = None
    new_client_order_id: Optional[str] = None

    def to_params(self) -> List[Tuple[str, object]]:
        params = [
            ("symbol", self.symbol.upper()),
            ("side", self.side),
            ("positionSide", self.position_side),
            ("type", self.order_type),
            ("timeInForce", self.time_in_force),
            ("quantity", self.quantity),
            ("reduceOnly", self.reduce_only),
            ("price", self.price),
            ("stopPrice", self.stop_price),
            ("closePosition", self.close_position),
            ("activationPrice", self.activation_price),
            ("callbackRate", self.callback_rate),
            ("workingType", self.working_type),
            ("priceProtect", None if self.price_protect is None else bool_to_string(self.price_protect)),
            ("newClientOrderId", self.new_client_order_id),
        ]
        return [(k, v) for k, v in params if v is not None]


@dataclass
class OrderCancellation:
    symbol: str
    order_id: Optional[int] = None
    orig_client_order_id: Optional[str] = None
    recv_window: Optional[int] = None

    def to_params(self) -> List[Tuple[str, object]]:
        params = [
            ("symbol", self.symbol.upper()),
            ("orderId", self.order_id),
            ("origClientOrderId", self.orig_client_order_id),
        ]
        return [(k, v) for k, v in params if v is not None]


class FuturesAccount(FuturesApi):

    async def place_order(self, order: OrderRequest) -> Transaction:
        return await self.client.post_signed_p(self.get_api(Route.ORDER), order.to_params(), self.recv_window, model=Transaction)

    async def limit_buy(self, symbol: str, qty: Number, price: Number, time_in_force: TimeInForce = TimeInForce.GTC) -> Transaction:
        return await self.place_order(OrderRequest(
            symbol=symbol, side=OrderSide.BUY, order_type=OrderType.LIMIT,
            time_in_force=time_in_force, quantity=qty, price=price,
        ))

    async def limit_sell(self, symbol: str, qty: Number, price: Number, time_in_force: TimeInForce = TimeInForce.GTC) -> Transaction:
        return await self.place_order(OrderRequest(
            symbol=symbol, side=OrderSide.SELL, order_type=OrderType.LIMIT,
            time_in_force=time_in_force, quantity=qty, price=price,
        ))

    async def market_buy(self, symbol: str, qty: Number) -> Transaction:
        return await self.place_order(OrderRequest(symbol=symbol, side=OrderSide.BUY, order_type=OrderType.MARKET, quantity=qty))

    async def market_sell(self, symbol: str, qty: Number) -> Transaction:
        return await self.place_order(OrderRequest(symbol=symbol, side=OrderSide.SELL, order_type=OrderType.MARKET, quantity=qty))

    async def cancel_order(self, cancellation: OrderCancellation) -> CanceledOrder:
        recv_window = self.recv_window if cancellation.recv_window is None else cancellation.recv_window
        return await self.client.delete_signed_p(self.get_api(Route.ORDER), cancellation.to_params(), recv_window, model=CanceledOrder)

    async def get_open_orders(self, symbol: str) -> List[Transaction]:
        return await self.client.get_signed_p(self.get_api(Route.OPEN_ORDERS), [("symbol", symbol.upper())], self.recv_window, model=List[Transaction])

    async def position_information(self, symbol: str) -> List[Position]:
        return await self.client.get_signed_p(self.get_api(Route.POSITION_RISK), [("symbol", symbol.upper())], self.recv_window, model=List[Position])

    async def account_information(self) -> dict:
        return await self.client.get_signed_p(self.get_api(Route.ACCOUNT), None, self.recv_window)

    async def account_balance(self) -> List[AccountBalance]:
        return await self.client.get_signed_p(self.get_api(Route.BALANCE), None, self.recv_window, model=List[AccountBalance])

    async def change_initial_leverage(self, symbol: str, leverage: int) -> ChangeLeverageResponse:
        params = [("symbol", symbol.upper()), ("leverage", leverage)]
        return await self.client.post_signed_p(self.get_api(Route.CHANGE_INITIAL_LEVERAGE), params, self.recv_window, model=ChangeLeverageResponse)

    async def change_position_mode(self, dual_side_position: bool) -> None:
        await self.client.post_signed_p(self.get_api(Route.POSITION_SIDE), [("dualSidePosition", dual_side_position)], self.recv_window)

    async def cancel_all_open_orders(self, symbol: str) -> None:
        await self.client.delete_signed_p(self.get_api(Route.ALL_OPEN_ORDERS), [("symbol", symbol.upper())], self.recv_window)
