from __future__ import annotations

import logging
import unittest
from unittest.mock import patch

from shortforge.core import logging as sf_logging
from shortforge.core.config import Settings


class SettingsTests(unittest.TestCase):
    def test_log_level_is_normalized(self):
        self.assertEqual(Settings(LOG_LEVEL=" debug ").LOG_LEVEL, "DEBUG")

    def test_unknown_log_level_falls_back_to_info(self):
        for value in ("loud", "", "TRACE"):
            with self.subTest(value=value):
                self.assertEqual(Settings(LOG_LEVEL=value).LOG_LEVEL, "INFO")

    def test_unknown_level_from_environment_does_not_break_loggers(self):
        with patch.dict("os.environ", {"LOG_LEVEL": "verbose"}):
            cfg = Settings()
        with patch.object(sf_logging, "settings", cfg):
            log = sf_logging.get_logger("tests.config_level")
        self.assertEqual(log.level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
