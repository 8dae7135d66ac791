"""Configuration tests."""

import pytest
from clasp.core.config import Config, get_config, split_key


@pytest.fixture
def config(repo):
    return get_config(repo)


def test_get_fallback(config):
    """Unset keys return the fallback."""
    assert config.get('color', 'ui') is None
    assert config.get('color', 'ui', 'true') == 'true'


def test_set_and_get_repo(config, repo):
    """Repository values are written to .clasp/config."""
    config.set('color', 'ui', 'false')

    assert repo.config_file.exists()
    assert Config(repo.config_file).get('color', 'ui') == 'false'


def test_repo_overrides_global(config, repo):
    """Repository config wins over global config."""
    config.set('core', 'loglevel', 'INFO', global_config=True)
    assert Config(repo.config_file).get('core', 'loglevel') == 'INFO'

    Config(repo.config_file).set('core', 'loglevel', 'DEBUG')
    assert Config(repo.config_file).get('core', 'loglevel') == 'DEBUG'


def test_environment_overrides_files(config, monkeypatch):
    """CLASP_<SECTION>_<KEY> wins over both files."""
    config.set('color', 'ui', 'true')
    monkeypatch.setenv('CLASP_COLOR_UI', 'never')

    assert config.get('color', 'ui') == 'never'
    assert config.get_bool('color', 'ui', fallback=True) is False


@pytest.mark.parametrize('value, expected', [
    ('true', True), ('Yes', True), ('1', True), ('auto', True),
    ('false', False), ('off', False), ('never', False),
    ('maybe', True),
])
def test_get_bool(config, value, expected):
    """Boolean values accept the usual spellings."""
    config.set('color', 'ui', value)
    assert Config(config.repo_config_path).get_bool('color', 'ui', fallback=True) is expected


def test_unset(config):
    """Unset removes the key and empty sections."""
    config.set('color', 'ui', 'false')
    assert config.unset('color', 'ui') is True
    assert config.unset('color', 'ui') is False
    assert 'color' not in config.list_all(repo_only=True)


def test_list_all_marks_global(config):
    """Global values are labelled in listings."""
    config.set('core', 'loglevel', 'INFO', global_config=True)
    config.set('color', 'ui', 'false')

    values = config.list_all()
    assert values['core'] == {'loglevel (global)': 'INFO'}
    assert values['color'] == {'ui': 'false'}


def test_set_repo_without_path():
    """Global-only config cannot write repository values."""
    with pytest.raises(ValueError):
        Config().set('color', 'ui', 'false')


def test_split_key():
    """Dotted keys split into section and option."""
    assert split_key('color.ui') == ('color', 'ui')
    assert split_key('loglevel') == ('core', 'loglevel')
