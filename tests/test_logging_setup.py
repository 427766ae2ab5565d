import logging
import unittest

from cursorhelp.logging_setup import LOG_FORMAT, configure_logging


class TestConfigureLogging(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self._saved_handlers = list(root.handlers)
        self._saved_level = root.level

    def tearDown(self) -> None:
        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in self._saved_handlers:
            root.addHandler(handler)
        root.setLevel(self._saved_level)

    def test_installs_a_single_console_handler(self) -> None:
        configure_logging("DEBUG")
        configure_logging("WARNING")
        root = logging.getLogger()
        self.assertEqual(len(root.handlers), 1)
        self.assertEqual(root.level, logging.WARNING)
        self.assertEqual(root.handlers[0].formatter._fmt, LOG_FORMAT)


if __name__ == "__main__":
    unittest.main()
