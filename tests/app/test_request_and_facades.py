import pytest

from application.facades import AliasLoader, App, Config, Facade
from application.http.request import Request


def test_request_capture_from_environ():
    request = Request.capture({
        'REQUEST_METHOD': 'get',
        'REQUEST_URI': '/shop/?page=2&tag=a&tag=b',
        'HTTP_HOST': 'example.test',
        'HTTP_X_REQUESTED_WITH': 'XMLHttpRequest',
        'CONTENT_TYPE': 'application/json',
        'HTTPS': 'on',
        'REMOTE_ADDR': '10.0.0.1',
    })

    assert request.method == 'GET'
    assert request.path == '/shop/'
    assert request.query == {'page': ['2'], 'tag': ['a', 'b']}
    assert request.scheme == 'https'
    assert request.host == 'example.test'
    assert request.header('x_requested_with') == 'XMLHttpRequest'
    assert request.is_json()


def test_request_defaults_outside_a_request():
    request = Request.capture({})
    assert (request.method, request.uri, request.host) == ('GET', '/', None)


def test_facade_without_application_raises():
    with pytest.raises(RuntimeError, match='facade root has not been set'):
        Config.get('app.name')


def test_facade_caches_resolved_root(tmp_path):
    from application.application import Application

    app = Application(tmp_path)
    app.instance('config', {'name': 'cached'})
    Facade.set_facade_application(app)

    assert Config.get('name') == 'cached'
    app.instance('config', {'name': 'replaced'})
    assert Config.get('name') == 'cached'
    Facade.clear_resolved_instances()
    assert Config.get('name') == 'replaced'
    assert App.base_path() == tmp_path


def test_alias_loader_imports_lazily():
    loader = AliasLoader({'Config': 'application.facades.Config'})
    assert loader.Config is Config
    with pytest.raises(AttributeError):
        loader.Missing
