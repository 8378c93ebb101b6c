"""Response payloads for the futures REST endpoints.

Only the fields callers rely on are declared; everything else in a payload
is ignored. Prices and quantities are Decimal.
"""
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class OrderSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class OrderType(str, Enum):
    LIMIT = "LIMIT"
    MARKET = "MARKET"
    STOP = "STOP"
    STOP_MARKET = "STOP_MARKET"
    TAKE_PROFIT = "TAKE_PROFIT"
    TAKE_PROFIT_MARKET = "TAKE_PROFIT_MARKET"
    TRAILING_STOP_MARKET = "TRAILING_STOP_MARKET"


class TimeInForce(str, Enum):
    GTC = "GTC"
    IOC = "IOC"
    FOK = "FOK"
    GTX = "GTX"


class PositionSide(str, Enum):
    BOTH = "BOTH"
    LONG = "LONG"
    SHORT = "SHORT"


class WorkingType(str, Enum):
    MARK_PRICE = "MARK_PRICE"
    CONTRACT_PRICE = "CONTRACT_PRICE"


class _RestModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Success(_RestModel):
    """Empty ``{}`` acknowledgement."""


class ServerTime(_RestModel):
    server_time: int = Field(alias="serverTime")


class Symbol(_RestModel):
    symbol: str
    pair: Optional[str] = None
    contract_type: Optional[str] = Field(default=None, alias="contractType")
    status: Optional[str] = None
    base_asset: str = Field(alias="baseAsset")
    quote_asset: str = Field(alias="quoteAsset")
    margin_asset: Optional[str] = Field(default=None, alias="marginAsset")
    price_precision: int = Field(alias="pricePrecision")
    quantity_precision: int = Field(alias="quantityPrecision")
    filters: List[dict] = Field(default_factory=list)


class ExchangeInformation(_RestModel):
    timezone: str
    server_time: int = Field(alias="serverTime")
    rate_limits: List[dict] = Field(default_factory=list, alias="rateLimits")
    symbols: List[Symbol]


class PriceLevel(_RestModel):
    price: Decimal
    qty: Decimal

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, value):
        if isinstance(value, (list, tuple)) and len(value) >= 2:
            return {"price": value[0], "qty": value[1]}
        return value


class OrderBook(_RestModel):
    last_update_id: int = Field(alias="lastUpdateId")
    bids: List[PriceLevel]
    asks: List[PriceLevel]


class KlineSummary(_RestModel):
    """One kline row; the wire format is a positional array."""
    open_time: int
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Decimal
    close_time: int
    quote_asset_volume: Decimal
    number_of_trades: int
    taker_buy_base_asset_volume: Decimal
    taker_buy_quote_asset_volume: Decimal

    @model_validator(mode="before")
    @classmethod
    def _from_row(cls, value):
        if isinstance(value, (list, tuple)):
            names = list(cls.model_fields)
            return dict(zip(names, value[:len(names)]))
        return value


class Transaction(_RestModel):
    client_order_id: str = Field(alias="clientOrderId")
    order_id: int = Field(alias="orderId")
    symbol: str
    status: str
    side: OrderSide
    order_type: OrderType = Field(alias="type")
    price: Decimal
    avg_price: Optional[Decimal] = Field(default=None, alias="avgPrice")
    orig_qty: Decimal = Field(alias="origQty")
    executed_qty: Decimal = Field(alias="executedQty")
    reduce_only: Optional[bool] = Field(default=None, alias="reduceOnly")
    position_side: Optional[PositionSide] = Field(default=None, alias="positionSide")
    time_in_force: Optional[TimeInForce] = Field(default=None, alias="timeInForce")
    update_time: int = Field(alias="updateTime")


CanceledOrder = Transaction


class Position(_RestModel):
    symbol: str
    position_amount: Decimal = Field(alias="positionAmt")
    entry_price: Decimal = Field(alias="entryPrice")
    mark_price: Decimal = Field(alias="markPrice")
    unrealized_profit: Decimal = Field(alias="unRealizedProfit")
    liquidation_price: Decimal = Field(alias="liquidationPrice")
    leverage: Decimal
    margin_type: str = Field(alias="marginType")
    position_side: PositionSide = Field(alias="positionSide")


class AccountBalance(_RestModel):
    account_alias: Optional[str] = Field(default=None, alias="accountAlias")
    asset: str
    balance: Decimal
    cross_wallet_balance: Optional[Decimal] = Field(default=None, alias="crossWalletBalance")
    available_balance: Optional[Decimal] = Field(default=None, alias="availableBalance")


class ChangeLeverageResponse(_RestModel):
    leverage: int
    symbol: str
    max_notional_value: Optional[Decimal] = Field(default=None, alias="maxNotionalValue")


class UserDataStream(_RestModel):
    listen_key: str = Field(alias="listenKey")
