import json
from decimal import Decimal

import pytest

from binance_client.errors import DecodeError
from binance_client.ws_models import (
    EVENT_TYPES,
    AccountPositionUpdate,
    AggTradeEvent,
    BalanceUpdate,
    DayTickerEvent,
    DepthOrderBookEvent,
    KlineEvent,
    MiniDayTickerEvent,
    OrderListUpdate,
    OrderUpdate,
    TradeEvent,
    decode_event,
)

TRADE = {
    "e": "trade", "E": 1672515782136, "T": 1672515782130, "s": "BTCUSDT",
    "t": 12345, "p": "16500.10", "q": "0.002", "X": "MARKET", "m": True,
}

SAMPLES = {
    "aggTrade": {
        "e": "aggTrade", "E": 123456789, "s": "BTCUSDT", "a": 5933014, "p": "0.001",
        "q": "100", "f": 100, "l": 105, "T": 123456785, "m": True,
    },
    "trade": TRADE,
    "kline": {
        "e": "kline", "E": 123456789, "s": "BTCUSDT",
        "k": {
            "t": 123400000, "T": 123460000, "s": "BTCUSDT", "i": "1m", "f": 100,
            "L": 200, "o": "0.0010", "c": "0.0020", "h": "0.0025", "l": "0.0015",
            "v": "1000", "n": 100, "x": False, "q": "1.0000", "V": "500",
            "Q": "0.500", "B": "123456",
        },
    },
    "24hrTicker": {
        "e": "24hrTicker", "E": 123456789, "s": "BTCUSDT", "p": "0.0015", "P": "250.00",
        "w": "0.0018", "c": "0.0025", "Q": "10", "o": "0.0010", "h": "0.0025",
        "l": "0.0010", "v": "10000", "q": "18", "O": 0, "C": 86400000, "F": 0,
        "L": 18150, "n": 18151,
    },
    "24hrMiniTicker": {
        "e": "24hrMiniTicker", "E": 123456789, "s": "BTCUSDT", "c": "0.0025",
        "o": "0.0010", "h": "0.0025", "l": "0.0010", "v": "10000", "q": "18",
    },
    "depthUpdate": {
        "e": "depthUpdate", "E": 123456789, "T": 123456788, "s": "BTCUSDT",
        "U": 157, "u": 160, "pu": 149,
        "b": [["0.0024", "10"]], "a": [["0.0026", "100"], ["0.0027", "5"]],
    },
    "outboundAccountPosition": {
        "e": "outboundAccountPosition", "E": 1564034571105, "u": 1564034571073,
        "B": [{"a": "ETH", "f": "10000.000000", "l": "0.000000"}],
    },
    "balanceUpdate": {
        "e": "balanceUpdate", "E": 1573200697110, "a": "BTC", "d": "100.00000000",
        "T": 1573200697068,
    },
    "executionReport": {
        "e": "executionReport", "E": 1499405658658, "s": "ETHBTC", "c": "mUvoqJxFIILMdfAW5iGSOW",
        "S": "BUY", "o": "LIMIT", "f": "GTC", "q": "1.00000000", "p": "0.10264410",
        "P": "0.00000000", "F": "0.00000000", "g": -1, "C": "", "x": "NEW", "X": "NEW",
        "r": "NONE", "i": 4293153, "l": "0.00000000", "z": "0.00000000",
        "L": "0.00000000", "n": "0", "N": None, "T": 1499405658657, "t": -1,
        "I": 8641984, "w": True, "m": False, "M": False, "O": 1499405658657,
        "Z": "0.00000000", "Y": "0.00000000", "Q": "0.00000000",
    },
    "listStatus": {
        "e": "listStatus", "E": 1564035303637, "s": "ETHBTC", "g": 2, "c": "OCO",
        "l": "EXEC_STARTED", "L": "EXECUTING", "r": "NONE",
        "C": "F4QN4G8DlFATFlIUQ0cjdD", "T": 1564035303625,
        "O": [
            {"s": "ETHBTC", "i": 17, "c": "AJYsMjErWJesZvqlJCTUgL"},
            {"s": "ETHBTC", "i": 18, "c": "bfYPSQdLoqAJeNrOr9adzq"},
        ],
    },
}

EXPECTED_TYPES = {
    "aggTrade": AggTradeEvent,
    "trade": TradeEvent,
    "kline": KlineEvent,
    "24hrTicker": DayTickerEvent,
    "24hrMiniTicker": MiniDayTickerEvent,
    "depthUpdate": DepthOrderBookEvent,
    "outboundAccountPosition": AccountPositionUpdate,
    "balanceUpdate": BalanceUpdate,
    "executionReport": OrderUpdate,
    "listStatus": OrderListUpdate,
}


def test_every_discriminator_registered():
    assert set(EVENT_TYPES) == set(EXPECTED_TYPES)


@pytest.mark.parametrize("tag", sorted(SAMPLES))
def test_each_sample_decodes_to_its_variant(tag):
    event = decode_event(json.dumps(SAMPLES[tag]))
    assert isinstance(event, EXPECTED_TYPES[tag])
    assert event.event_type == tag


def test_combined_frame_equals_bare_frame():
    bare = decode_event(json.dumps(TRADE))
    wrapped = decode_event(json.dumps({"stream": "btcusdt@trade", "data": TRADE}))
    assert wrapped == bare
    assert isinstance(wrapped, TradeEvent)


def test_trade_fields():
    event = decode_event(json.dumps(TRADE))
    assert event.symbol == "BTCUSDT"
    assert event.price == Decimal("16500.10")
    assert event.qty == Decimal("0.002")
    assert event.is_buyer_maker is True
    assert event.trade_order_time == 1672515782130


def test_depth_levels_parsed_from_pairs():
    event = decode_event(json.dumps(SAMPLES["depthUpdate"]))
    assert event.bids[0].price == Decimal("0.0024")
    assert event.asks[1].qty == Decimal("5")
    assert event.previous_final_update_id == 149


def test_kline_nested():
    event = decode_event(json.dumps(SAMPLES["kline"]))
    assert event.kline.interval == "1m"
    assert event.kline.is_final_bar is False
    assert event.kline.last_trade_id == 200


def test_bytes_frame_accepted():
    event = decode_event(json.dumps(TRADE).encode("utf-8"))
    assert isinstance(event, TradeEvent)


def test_unknown_tag_fails():
    frame = json.dumps({"e": "markPriceUpdate", "E": 1, "s": "BTCUSDT"})
    with pytest.raises(DecodeError, match="Unknown event type"):
        decode_event(frame)


def test_missing_tag_fails():
    with pytest.raises(DecodeError):
        decode_event(json.dumps({"E": 1, "s": "BTCUSDT"}))


def test_invalid_json_fails_with_size():
    with pytest.raises(DecodeError) as exc_info:
        decode_event("{not json")
    assert exc_info.value.payload_size == len("{not json")


def test_array_frame_fails():
    with pytest.raises(DecodeError):
        decode_event(json.dumps([SAMPLES["24hrMiniTicker"]]))


def test_wrong_field_type_fails():
    bad = dict(TRADE, t="not-a-number")
    with pytest.raises(DecodeError, match="Invalid trade event"):
        decode_event(json.dumps(bad))
