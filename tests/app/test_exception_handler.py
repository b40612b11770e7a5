import logging
import sys

from application.exception_handler import ExceptionHandler, configure_logging


def test_install_and_uninstall_restore_the_previous_hook():
    previous = sys.excepthook
    handler = ExceptionHandler()

    handler.install()
    handler.install()
    assert handler.installed
    assert sys.excepthook == handler.handle_uncaught

    handler.uninstall()
    assert not handler.installed
    assert sys.excepthook is previous


def test_report_logs_critical_and_skips_dont_report(caplog):
    handler = ExceptionHandler()

    with caplog.at_level(logging.CRITICAL, logger='application.exception_handler'):
        handler.report(ValueError('bad input'))
        handler.report(KeyboardInterrupt())

    assert [r.getMessage() for r in caplog.records] == ['Unhandled ValueError: bad input']


def test_unreported_exceptions_reach_the_previous_hook(monkeypatch):
    calls = []
    monkeypatch.setattr(sys, 'excepthook', lambda exc_type, exc, tb: calls.append(exc_type))
    handler = ExceptionHandler()
    handler.install()

    sys.excepthook(KeyboardInterrupt, KeyboardInterrupt(), None)
    sys.excepthook(ValueError, ValueError('reported'), None)

    assert calls == [KeyboardInterrupt]


def test_configure_logging_leaves_existing_handlers_alone():
    root = logging.getLogger()
    root.addHandler(logging.NullHandler())
    before = list(root.handlers)

    configure_logging({'level': 'debug'})

    assert root.handlers == before
