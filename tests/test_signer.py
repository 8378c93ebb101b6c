import hashlib
import hmac
from decimal import Decimal
from unittest.mock import patch

import pytest

from binance_client.errors import MissingCredentials
from binance_client.rest_models import OrderSide
from binance_client.signer import (
    bool_to_string,
    build_request,
    build_signed_request,
    format_value,
    sign,
    signed_query,
)


def test_recv_window_first_then_timestamp_then_params():
    query = build_signed_request([("symbol", "BTCUSDT"), ("limit", 5)], 5000, timestamp=1700000000000)
    assert query == "recvWindow=5000&timestamp=1700000000000&symbol=BTCUSDT&limit=5"


def test_zero_recv_window_is_omitted():
    query = build_signed_request([("symbol", "BTCUSDT")], 0, timestamp=1)
    assert "recvWindow=" not in query
    assert query == "timestamp=1&symbol=BTCUSDT"


def test_no_params_still_carries_timestamp():
    assert build_signed_request(None, 0, timestamp=42) == "timestamp=42"
    assert build_signed_request({}, 0, timestamp=42) == "timestamp=42"


def test_negative_recv_window_rejected():
    with pytest.raises(ValueError):
        build_signed_request(None, -1)


def test_timestamp_taken_from_clock_when_not_given():
    with patch("binance_client.signer.time.time", return_value=1700000000.5):
        assert build_signed_request(None, 0) == "timestamp=1700000000500"


def test_empty_keys_and_none_values_dropped():
    query = build_request([("", "x"), ("symbol", "ETHUSDT"), ("limit", None)])
    assert query == "symbol=ETHUSDT"


def test_caller_order_preserved():
    assert build_request([("b", 1), ("a", 2)]) == "b=1&a=2"
    assert build_request({"z": 1, "y": 2}) == "z=1&y=2"


def test_values_are_not_percent_encoded():
    assert build_request([("newClientOrderId", "a b/c")]) == "newClientOrderId=a b/c"


def test_signature_is_hex_hmac_sha256():
    query = "timestamp=1&symbol=BTCUSDT"
    expected = hmac.new(b"secret", query.encode(), hashlib.sha256).hexdigest()
    assert sign(query, "secret") == expected


def test_signature_deterministic_and_sensitive_to_every_char():
    query = build_signed_request([("symbol", "BTCUSDT"), ("quantity", 0.1)], 5000, timestamp=1700000000000)
    assert sign(query, "k") == sign(query, "k")
    for i in range(len(query)):
        altered = query[:i] + ("X" if query[i] != "X" else "Y") + query[i + 1:]
        assert sign(altered, "k") != sign(query, "k")


def test_signed_query_appends_signature_last():
    query = "timestamp=1"
    result = signed_query(query, "secret")
    assert result.startswith("timestamp=1&signature=")
    assert result.count("signature=") == 1
    assert result.split("signature=")[1] == sign(query, "secret")


@pytest.mark.parametrize("secret", [None, ""])
def test_missing_secret_raises_before_hmac(secret):
    with patch("binance_client.signer.hmac.new") as mock_hmac:
        with pytest.raises(MissingCredentials):
            sign("timestamp=1", secret)
    mock_hmac.assert_not_called()


def test_format_value_is_stable():
    assert format_value(0.1) == "0.1"
    assert format_value(1e-07) == "0.0000001"
    assert format_value(50000.0) == "50000.0"
    assert format_value(Decimal("0.00100")) == "0.00100"
    assert format_value(True) == "true"
    assert format_value(OrderSide.BUY) == "BUY"
    assert format_value(7) == "7"


def test_bool_to_string_uppercase():
    assert bool_to_string(True) == "TRUE"
    assert bool_to_string(False) == "FALSE"
