import json

import pytest

from bootstrap.exceptions import ConfigurationError
from configs import DEFAULT_CONFIG, ConfigLoader, ConfigMerger, ConfigRepository, merge_configs


def write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding='utf-8')
    return path


def test_missing_directory_yields_defaults(tmp_path):
    config = ConfigLoader(tmp_path / 'absent').load()
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_file_stems_become_top_level_keys(tmp_path):
    write(tmp_path / 'app.yaml', 'name: Shop\n')
    write(tmp_path / 'services.yml', 'mailer: smtp\n')
    write(tmp_path / 'cache.json', json.dumps({'driver': 'file'}))
    write(tmp_path / 'notes.txt', 'ignored')

    config = ConfigLoader(tmp_path).load()

    assert config['app']['name'] == 'Shop'
    assert config['app']['debug'] is False
    assert config['services'] == {'mailer': 'smtp'}
    assert config['cache'] == {'driver': 'file'}
    assert 'notes' not in config


def test_environment_overlay_is_merged_last(tmp_path):
    write(tmp_path / 'app.yaml', 'env: staging\ndebug: false\n')
    write(tmp_path / 'logging.yaml', 'level: INFO\n')
    write(tmp_path / 'staging' / 'logging.yaml', 'level: DEBUG\n')

    config = ConfigLoader(tmp_path).load()

    assert config['app']['env'] == 'staging'
    assert config['logging']['level'] == 'DEBUG'
    assert config['logging']['format'] == DEFAULT_CONFIG['logging']['format']


def test_explicit_environment_wins(tmp_path):
    write(tmp_path / 'app.yaml', 'env: staging\n')
    write(tmp_path / 'local' / 'app.yaml', 'debug: true\n')

    config = ConfigLoader(tmp_path).load(env='local')

    assert config['app']['env'] == 'local'
    assert config['app']['debug'] is True


def test_env_placeholders_expand_to_typed_values(tmp_path, monkeypatch):
    monkeypatch.setenv('SHOP_DEBUG', 'true')
    monkeypatch.delenv('SHOP_PORT', raising=False)
    monkeypatch.delenv('SHOP_NAME', raising=False)
    write(tmp_path / 'app.yaml', (
        'debug: ${SHOP_DEBUG:-false}\n'
        'port: ${SHOP_PORT:-8080}\n'
        'name: ${SHOP_NAME:-Shop}\n'
        'url: https://${SHOP_NAME:-shop}.test\n'
    ))

    app = ConfigLoader(tmp_path).load()['app']

    assert app['debug'] is True
    assert app['port'] == 8080
    assert app['name'] == 'Shop'
    assert app['url'] == 'https://shop.test'


@pytest.mark.parametrize('text', ['name: [unclosed\n', '- just\n- a list\n'])
def test_malformed_files_raise_configuration_error(tmp_path, text):
    write(tmp_path / 'app.yaml', text)
    with pytest.raises(ConfigurationError) as excinfo:
        ConfigLoader(tmp_path).load()
    assert excinfo.value.phase == 'LoadConfiguration'
    assert 'app.yaml' in str(excinfo.value)


def test_merger_recurses_and_leaves_inputs_untouched():
    base = {'a': {'b': 1, 'c': [1, 2]}, 'keep': True}
    override = {'a': {'c': [3]}, 'new': 'x'}

    merged = ConfigMerger.merge(base, override)

    assert merged == {'a': {'b': 1, 'c': [3]}, 'keep': True, 'new': 'x'}
    assert base == {'a': {'b': 1, 'c': [1, 2]}, 'keep': True}


def test_merger_strict_keys_rejects_unknown_keys():
    with pytest.raises(ValueError, match='Strict mode'):
        ConfigMerger.merge({'a': 1}, {'b': 2}, strict_keys=True)


def test_merge_configs_applies_overrides_in_order():
    assert merge_configs({'v': 1}, {'v': 2}, {'v': 3}) == {'v': 3}


def test_repository_dotted_access():
    repo = ConfigRepository({'app': {'name': 'Shop', 'debug': False}})

    assert repo.get('app.name') == 'Shop'
    assert repo.get('app.missing', 'fallback') == 'fallback'
    assert repo.has('app.debug')
    assert not repo.has('app.debug.deeper')
    assert repo['app.debug'] is False
    with pytest.raises(KeyError):
        repo['nope']

    repo.set('cache.stores.file.path', '/tmp/cache')
    assert repo.get('cache.stores.file') == {'path': '/tmp/cache'}
    assert set(repo) == {'app', 'cache'}
    assert len(repo) == 2
