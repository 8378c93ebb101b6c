"""Typed WebSocket events and the frame decoder.

Every event carries its type tag in the ``e`` field. ``decode_event``
accepts both combined-stream frames (``{"stream": ..., "data": {...}}``) and
bare event objects, and refuses tags it does not know.
"""
import json
from decimal import Decimal
from typing import ClassVar, Dict, List, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import DecodeError


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class WebsocketEvent(_WireModel):
    EVENT_TYPE: ClassVar[str] = ""

    event_type: str = Field(alias="e")
    event_time: int = Field(alias="E")


class PriceLevel(_WireModel):
    """One ``[price, qty]`` pair of a depth update."""
    price: Decimal
    qty: Decimal

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, value):
        if isinstance(value, (list, tuple)) and len(value) >= 2:
            return {"price": value[0], "qty": value[1]}
        return value


class AggTradeEvent(WebsocketEvent):
    EVENT_TYPE: ClassVar[str] = "aggTrade"

    symbol: str = Field(alias="s")
    aggregated_trade_id: int = Field(alias="a")
    price: Decimal = Field(alias="p")
    qty: Decimal = Field(alias="q")
    first_break_trade_id: int = Field(alias="f")
    last_break_trade_id: int = Field(alias="l")
    trade_order_time: int = Field(alias="T")
    is_buyer_maker: bool = Field(alias="m")


class TradeEvent(WebsocketEvent):
    EVENT_TYPE: ClassVar[str] = "trade"

    trade_order_time: int = Field(alias="T")
    symbol: str = Field(alias="s")
    trade_id: int = Field(alias="t")
    price: Decimal = Field(alias="p")
    qty: Decimal = Field(alias="q")
    order_type: Optional[str] = Field(default=None, alias="X")
    is_buyer_maker: bool = Field(alias="m")


class Kline(_WireModel):
    start_time: int = Field(alias="t")
    end_time: int = Field(alias="T")
    symbol: str = Field(alias="s")
    interval: str = Field(alias="i")
    first_trade_id: int = Field(alias="f")
    last_trade_id: int = Field(alias="L")
    open: Decimal = Field(alias="o")
    close: Decimal = Field(alias="c")
    high: Decimal = Field(alias="h")
    low: Decimal = Field(alias="l")
    volume: Decimal = Field(alias="v")
    number_of_trades: int = Field(alias="n")
    is_final_bar: bool = Field(alias="x")
    quote_volume: Decimal = Field(alias="q")
    active_buy_volume: Decimal = Field(alias="V")
    active_volume_buy_quote: Decimal = Field(alias="Q")


class KlineEvent(WebsocketEvent):
    EVENT_TYPE: ClassVar[str] = "kline"

    symbol: str = Field(alias="s")
    kline: Kline = Field(alias="k")


class DayTickerEvent(WebsocketEvent):
    EVENT_TYPE: ClassVar[str] = "24hrTicker"

    symbol: str = Field(alias="s")
    price_change: Decimal = Field(alias="p")
    price_change_percent: Decimal = Field(alias="P")
    average_price: Decimal = Field(alias="w")
    current_close: Decimal = Field(alias="c")
    current_close_qty: Decimal = Field(alias="Q")
    open: Decimal = Field(alias="o")
    high: Decimal = Field(alias="h")
    low: Decimal = Field(alias="l")
    volume: Decimal = Field(alias="v")
    quote_volume: Decimal = Field(alias="q")
    open_time: int = Field(alias="O")
    close_time: int = Field(alias="C")
    first_trade_id: int = Field(alias="F")
    last_trade_id: int = Field(alias="L")
    num_trades: int = Field(alias="n")
    # spot-only fields
    prev_close: Optional[Decimal] = Field(default=None, alias="x")
    best_bid: Optional[Decimal] = Field(default=None, alias="b")
    best_bid_qty: Optional[Decimal] = Field(default=None, alias="B")
    best_ask: Optional[Decimal] = Field(default=None, alias="a")
    best_ask_qty: Optional[Decimal] = Field(default=None, alias="A")


class MiniDayTickerEvent(WebsocketEvent):
    EVENT_TYPE: ClassVar[str] = "24hrMiniTicker"

    symbol: str = Field(alias="s")
    current_close: Decimal = Field(alias="c")
    open: Decimal = Field(alias="o")
    high: Decimal = Field(alias="h")
    low: Decimal = Field(alias="l")
    volume: Decimal = Field(alias="v")
    quote_volume: Decimal = Field(alias="q")


class DepthOrderBookEvent(WebsocketEvent):
    EVENT_TYPE: ClassVar[str] = "depthUpdate"

    transaction_time: Optional[int] = Field(default=None, alias="T")
    symbol: str = Field(alias="s")
    first_update_id: int = Field(alias="U")
    final_update_id: int = Field(alias="u")
    previous_final_update_id: Optional[int] = Field(default=None, alias="pu")
    bids: List[PriceLevel] = Field(alias="b")
    asks: List[PriceLevel] = Field(alias="a")


class EventBalance(_WireModel):
    asset: str = Field(alias="a")
    free: Decimal = Field(alias="f")
    locked: Decimal = Field(alias="l")


class AccountPositionUpdate(WebsocketEvent):
    EVENT_TYPE: ClassVar[str] = "outboundAccountPosition"

    last_update_time: int = Field(alias="u")
    balances: List[EventBalance] = Field(alias="B")


class BalanceUpdate(WebsocketEvent):
    EVENT_TYPE: ClassVar[str] = "balanceUpdate"

    asset: str = Field(alias="a")
    delta: Decimal = Field(alias="d")
    clear_time: int = Field(alias="T")


class OrderUpdate(WebsocketEvent):
    EVENT_TYPE: ClassVar[str] = "executionReport"

    symbol: str = Field(alias="s")
    new_client_order_id: str = Field(alias="c")
    side: str = Field(alias="S")
    order_type: str = Field(alias="o")
    time_in_force: Optional[str] = Field(default=None, alias="f")
    qty: Decimal = Field(alias="q")
    price: Decimal = Field(alias="p")
    stop_price: Optional[Decimal] = Field(default=None, alias="P")
    iceberg_qty: Optional[Decimal] = Field(default=None, alias="F")
    order_list_id: Optional[int] = Field(default=None, alias="g")
    orig_client_order_id: Optional[str] = Field(default=None, alias="C")
    execution_type: str = Field(alias="x")
    current_order_status: str = Field(alias="X")
    order_reject_reason: Optional[str] = Field(default=None, alias="r")
    order_id: int = Field(alias="i")
    qty_last_executed: Optional[Decimal] = Field(default=None, alias="l")
    cumulative_filled_qty: Optional[Decimal] = Field(default=None, alias="z")
    last_executed_price: Optional[Decimal] = Field(default=None, alias="L")
    commission: Optional[Decimal] = Field(default=None, alias="n")
    commission_asset: Optional[str] = Field(default=None, alias="N")
    trade_order_time: Optional[int] = Field(default=None, alias="T")
    trade_id: Optional[int] = Field(default=None, alias="t")
    is_order_on_the_book: Optional[bool] = Field(default=None, alias="w")
    is_buyer_maker: Optional[bool] = Field(default=None, alias="m")
    order_creation_time: Optional[int] = Field(default=None, alias="O")
    cumulative_quote_qty: Optional[Decimal] = Field(default=None, alias="Z")
    last_quote_qty: Optional[Decimal] = Field(default=None, alias="Y")
    quote_order_qty: Optional[Decimal] = Field(default=None, alias="Q")


class OrderListEntry(_WireModel):
    symbol: str = Field(alias="s")
    order_id: int = Field(alias="i")
    client_order_id: str = Field(alias="c")


class OrderListUpdate(WebsocketEvent):
    EVENT_TYPE: ClassVar[str] = "listStatus"

    symbol: str = Field(alias="s")
    order_list_id: int = Field(alias="g")
    contingency_type: str = Field(alias="c")
    list_status_type: str = Field(alias="l")
    list_order_status: str = Field(alias="L")
    list_reject_reason: Optional[str] = Field(default=None, alias="r")
    list_client_order_id: str = Field(alias="C")
    transaction_time: int = Field(alias="T")
    orders: List[OrderListEntry] = Field(alias="O")


FuturesWebsocketEvent = Union[
    AggTradeEvent,
    TradeEvent,
    KlineEvent,
    DayTickerEvent,
    MiniDayTickerEvent,
    DepthOrderBookEvent,
    AccountPositionUpdate,
    BalanceUpdate,
    OrderUpdate,
    OrderListUpdate,
]

EVENT_TYPES: Dict[str, Type[WebsocketEvent]] = {
    model.EVENT_TYPE: model
    for model in (
        AggTradeEvent,
        TradeEvent,
        KlineEvent,
        DayTickerEvent,
        MiniDayTickerEvent,
        DepthOrderBookEvent,
        AccountPositionUpdate,
        BalanceUpdate,
        OrderUpdate,
        OrderListUpdate,
    )
}


def decode_event(raw: Union[str, bytes]) -> FuturesWebsocketEvent:
    """Decode one text frame into its typed event.

    Raises:
        DecodeError: invalid JSON, not an object, unknown or missing ``e``
            tag, or fields that do not match the selected event
    """
    payload_size = len(raw) if isinstance(raw, bytes) else len(raw.encode("utf-8"))
    try:
        value = json.loads(raw)
    except ValueError as e:
        raise DecodeError(f"Frame is not valid JSON: {e}", payload_size) from None

    if isinstance(value, dict) and "data" in value:
        value = value["data"]
    if not isinstance(value, dict):
        raise DecodeError("Frame is not a JSON object", payload_size)

    tag = value.get("e")
    model = EVENT_TYPES.get(tag) if isinstance(tag, str) else None
    if model is None:
        raise DecodeError(f"Unknown event type: {tag!r}", payload_size)

    try:
        return model.model_validate(value)
    except ValidationError as e:
        raise DecodeError(f"Invalid {tag} event: {e.error_count()} validation error(s)", payload_size) from None
