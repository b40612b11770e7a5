import json

from bootstrap.__main__ import main


def test_main_boots_on_setup_theme_and_runs_command(app_tree, monkeypatch, capsys):
    monkeypatch.setenv('APP_RUNNING_IN_CONSOLE', 'true')

    exit_code = main(['--base-path', str(app_tree), 'about', '--json'])

    info = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert info['name'] == 'Test App'
    assert info['environment'] == 'testing'
    assert info['base_path'] == str(app_tree)
    assert info['paths']['config'] == str(app_tree / 'config')


def test_main_loads_env_file(app_tree, tmp_path, monkeypatch, capsys):
    monkeypatch.setenv('APP_RUNNING_IN_CONSOLE', 'true')
    monkeypatch.setenv('SHOP_TITLE', 'placeholder')
    (app_tree / 'config' / 'shop.yaml').write_text('title: ${SHOP_TITLE:-none}\n', encoding='utf-8')
    dotenv = tmp_path / '.env'
    dotenv.write_text('SHOP_TITLE=ignored\n', encoding='utf-8')

    exit_code = main(['--base-path', str(app_tree), '--env-file', str(dotenv), 'config:show', 'shop.title'])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == '"placeholder"'


def test_main_without_command_prints_help(app_tree, monkeypatch, capsys):
    monkeypatch.setenv('APP_RUNNING_IN_CONSOLE', 'true')
    assert main(['--base-path', str(app_tree)]) == 1
    assert 'config:show' in capsys.readouterr().out
