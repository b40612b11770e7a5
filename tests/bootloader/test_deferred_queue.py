from unittest.mock import MagicMock

import pytest

from bootstrap.core.deferred_queue import CallbackCall, DeferredCall, DeferredCallQueue, ProviderRegistration


def _gate(open_: bool):
    gate = MagicMock()
    gate.is_ready.return_value = open_
    return gate


def test_buffers_while_gate_closed(recording_app_class):
    queue = DeferredCallQueue()
    provider = MagicMock()
    callback = MagicMock()

    queue.enqueue_or_run(CallbackCall(callback), _gate(False), provider)

    assert len(queue) == 1
    callback.assert_not_called()
    provider.assert_not_called()


def test_runs_immediately_when_gate_open(recording_app_class):
    app = recording_app_class()
    queue = DeferredCallQueue()
    seen = []

    result = queue.enqueue_or_run(CallbackCall(seen.append), _gate(True), lambda: app)

    assert result is queue
    assert seen == [app]
    assert len(queue) == 0


def test_flush_runs_in_submission_order_then_empties(recording_app_class):
    app = recording_app_class()
    queue = DeferredCallQueue()
    order = []
    closed = _gate(False)

    queue.enqueue_or_run(CallbackCall(lambda a: order.append('f1')), closed, MagicMock())
    queue.enqueue_or_run(ProviderRegistration('pkg.Provider', True), closed, MagicMock())
    queue.enqueue_or_run(CallbackCall(lambda a: order.append('f2')), closed, MagicMock())

    assert queue.flush(app) == 3
    assert order == ['f1', 'f2']
    assert app.events == [('register', 'pkg.Provider', True)]
    assert queue.pending() == []
    assert queue.flush(app) == 0


def test_flush_clears_buffer_even_when_a_call_fails(recording_app_class, caplog):
    app = recording_app_class()
    queue = DeferredCallQueue()
    closed = _gate(False)
    after = MagicMock()

    def boom(a):
        raise RuntimeError('boom')

    queue.enqueue_or_run(CallbackCall(boom), closed, MagicMock())
    queue.enqueue_or_run(CallbackCall(after), closed, MagicMock())

    with pytest.raises(RuntimeError, match='boom'):
        queue.flush(app)

    after.assert_not_called()
    assert len(queue) == 0
    assert '1 queued call(s) after it were dropped' in caplog.text


def test_provider_registration_forwards_force_flag():
    app = MagicMock()
    ProviderRegistration('x.Y').dispatch(app)
    ProviderRegistration('x.Y', force=True).dispatch(app)
    assert [c.args for c in app.register.call_args_list] == [('x.Y', False), ('x.Y', True)]


def test_deferred_call_requires_dispatch():
    class Incomplete(DeferredCall):
        pass

    with pytest.raises(TypeError):
        Incomplete()


def test_push_buffers_without_consulting_the_gate():
    app = MagicMock()
    queue = DeferredCallQueue()

    queue.push(CallbackCall(lambda a: None))

    assert len(queue) == 1
    assert queue.flush(app) == 1
    app.call.assert_called_once()
