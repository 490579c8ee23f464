"""Testy logowania JSON"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import json
import logging
from utils.logging import JsonFormatter, get_logger


class TestJsonFormatter:
    def test_payload(self):
        record = logging.LogRecord("core.test", logging.WARNING, __file__, 1, "saldo %s", ("1000",), None)
        payload = json.loads(JsonFormatter().format(record))
        assert payload["level"] == "WARNING"
        assert payload["name"] == "core.test"
        assert payload["msg"] == "saldo 1000"
        assert "exc_info" not in payload

    def test_exception(self):
        try:
            raise ValueError("zła kwota")
        except ValueError:
            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "błąd", (), sys.exc_info())
        payload = json.loads(JsonFormatter().format(record))
        assert "zła kwota" in payload["exc_info"]


class TestGetLogger:
    def test_single_handler(self):
        first = get_logger("tests.single_handler")
        second = get_logger("tests.single_handler")
        assert first is second
        assert len(second.handlers) == 1
        assert isinstance(second.handlers[0].formatter, JsonFormatter)
