import logging

from heritagelens.logging_setup import setup_logging


class TestSetupLogging:
    def test_single_handler_after_repeated_calls(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging("debug")
            setup_logging("warning")
            assert len(root.handlers) == 1
            assert root.level == logging.WARNING
        finally:
            for h in root.handlers[:]:
                root.removeHandler(h)
            for h in saved_handlers:
                root.addHandler(h)
            root.setLevel(saved_level)
