import logging
import os
import tempfile
import unittest
from logging.handlers import RotatingFileHandler

import pytest

from fishfindr.logging_config import configure_logging


@pytest.mark.unit
class TestConfigureLogging(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.log_dir = os.path.join(self._tmp.name, "logs")

    def tearDown(self):
        logger = logging.getLogger("fishfindr")
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
        self._tmp.cleanup()

    def test_installs_file_and_console_handlers(self):
        logger = configure_logging(self.log_dir)

        self.assertEqual(logger.name, "fishfindr")
        self.assertEqual(len(logger.handlers), 2)
        file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        self.assertEqual(len(file_handlers), 1)
        self.assertTrue(os.path.isdir(self.log_dir))

    def test_reconfiguring_does_not_duplicate_handlers(self):
        configure_logging(self.log_dir)
        logger = configure_logging(self.log_dir, debug=True)
        self.assertEqual(len(logger.handlers), 2)
        self.assertEqual(logger.level, logging.DEBUG)

    def test_module_records_reach_log_file(self):
        logger = configure_logging(self.log_dir)
        logging.getLogger("fishfindr.report").warning("No location fix available yet")
        for handler in logger.handlers:
            handler.flush()

        with open(os.path.join(self.log_dir, "fishfindr.log"), encoding="utf-8") as f:
            content = f.read()
        self.assertIn("WARNING in test_logging_config: No location fix available yet", content)
