import json
import logging
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "themes"))
sys.path.insert(0, str(ROOT / "packages" / "generator"))

from termthemes_generator.logging_setup import JsonFormatter, configure_logging, get_logger


class JsonFormatterTests(unittest.TestCase):
    def test_payload_fields(self):
        record = logging.LogRecord("termthemes.test", logging.WARNING, __file__, 1, "skipping %s", ("a.json",), None)
        record.event = "scheme_skipped"
        payload = json.loads(JsonFormatter().format(record))
        self.assertEqual(payload["level"], "WARNING")
        self.assertEqual(payload["logger"], "termthemes.test")
        self.assertEqual(payload["msg"], "skipping a.json")
        self.assertEqual(payload["event"], "scheme_skipped")
        self.assertIn("ts_utc", payload)

    def test_exception_included(self):
        try:
            raise ValueError("bad")
        except ValueError:
            record = logging.LogRecord("t", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
        payload = json.loads(JsonFormatter().format(record))
        self.assertIn("ValueError: bad", payload["exc"])


class ConfigureLoggingTests(unittest.TestCase):
    def test_idempotent(self):
        first = configure_logging(console=False)
        handlers = list(first.handlers)
        second = configure_logging(console=False)
        self.assertIs(first, second)
        self.assertIs(second, get_logger())
        self.assertEqual(second.handlers, handlers)


if __name__ == "__main__":
    unittest.main()
