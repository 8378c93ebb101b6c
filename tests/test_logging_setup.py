import json

from binance_client.logging_setup import logger, setup_logging


def test_file_sink_created_in_nested_dir(tmp_path):
    log_file = tmp_path / "logs" / "client.log"
    setup_logging(log_file=str(log_file), level="DEBUG", enable_console=False)
    try:
        logger.debug("GET /fapi/v1/ping signed=False")
    finally:
        logger.remove()

    assert "GET /fapi/v1/ping" in log_file.read_text()


def test_level_filters_file_sink(tmp_path):
    log_file = tmp_path / "client.log"
    setup_logging(log_file=str(log_file), level="WARNING", enable_console=False)
    try:
        logger.info("quiet")
        logger.warning("loud")
    finally:
        logger.remove()

    content = log_file.read_text()
    assert "loud" in content
    assert "quiet" not in content


def test_serialized_sink_writes_json_lines(tmp_path):
    log_file = tmp_path / "client.jsonl"
    setup_logging(log_file=str(log_file), enable_console=False, serialize=True)
    try:
        logger.info("API error | status=400 code=-1121")
    finally:
        logger.remove()

    record = json.loads(log_file.read_text().splitlines()[0])
    assert record["record"]["message"] == "API error | status=400 code=-1121"
