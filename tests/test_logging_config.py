import logging

from blockfrost_node.config import default_config


def test_logging_level_config():
    level = getattr(logging, default_config.log_level.upper(), logging.INFO)
    assert level in (
        logging.DEBUG,
        logging.INFO,
        logging.WARNING,
        logging.ERROR,
        logging.CRITICAL,
    )


def test_json_formatter_includes_operation():
    from blockfrost_node.server import JsonFormatter

    record = logging.LogRecord("blockfrost_node", logging.INFO, __file__, 1, "done %s", ("x",), None)
    record.operation = "blocks.getBlock"
    rendered = JsonFormatter().format(record)
    assert '"operation": "blocks.getBlock"' in rendered
    assert '"message": "done x"' in rendered
