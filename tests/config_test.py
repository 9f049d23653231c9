import sys
import os
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from utils.config import AppConfig, load_config

def test_defaults():
    assert load_config({}) == AppConfig()

def test_values_from_environment():
    config = load_config({
        'PORT': '8080',
        'LOG_LEVEL': 'debug',
        'DIFF_CONTEXT': '5',
        'BRANCH_PREFIX': 'style',
        'DIFF_ALGORITHM': 'difflib',
    })
    assert config.port == 8080
    assert config.log_level == 'DEBUG'
    assert config.diff_context == 5
    assert config.branch_prefix == 'style'
    assert config.diff_algorithm == 'difflib'

def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv('PORT', '9000')
    assert load_config().port == 9000

@pytest.mark.parametrize('env', [
    {'PORT': 'abc'},
    {'DIFF_CONTEXT': '-1'},
    {'LOG_LEVEL': 'LOUD'},
    {'DIFF_ALGORITHM': 'myers'},
])
def test_invalid_values(env):
    with pytest.raises(ValueError):
        load_config(env)
