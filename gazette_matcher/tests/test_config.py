"""Tests for configuration loading and validation."""
import os
from datetime import date

import pytest

from ..cli.config import Config
from ..errors import ConfigError

ENV_VARS = [
    'MATCH_THRESHOLD', 'MATCH_MODE', 'NAME_COLUMN', 'APPROVAL_DATE', 'DATE_FORMAT',
    'OUTPUT_FORMAT', 'BATCH_SIZE', 'MAX_WORKERS', 'MATCH_TIMEOUT', 'LOG_LEVEL',
    'APP_ENV', 'HOST', 'PORT', 'ALLOWED_ORIGINS',
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    env_file = tmp_path / '.env'
    env_file.write_text('')
    yield env_file
    # load_dotenv writes straight into os.environ
    for name in ENV_VARS:
        os.environ.pop(name, None)


def test_defaults(clean_env):
    config = Config.from_env(clean_env)

    assert config.threshold == 100
    assert config.mode == 'filter'
    assert config.name_column == 'Name of The Deceased'
    assert config.output_format == 'text'
    assert config.timeout is None
    assert config.validate()


def test_values_from_env_file(clean_env):
    clean_env.write_text(
        "MATCH_THRESHOLD=85\n"
        "MATCH_MODE=annotate\n"
        "APPROVAL_DATE=05/06/2025\n"
        "MAX_WORKERS=4\n"
        "MATCH_TIMEOUT=2.5\n"
        "ALLOWED_ORIGINS=http://localhost:3000, http://example.org\n"
    )
    config = Config.from_env(clean_env)

    assert config.threshold == 85
    assert config.mode == 'annotate'
    assert config.max_workers == 4
    assert config.timeout == 2.5
    assert config.resolve_approval_date() == '05/06/2025'
    assert config.origins == ['http://localhost:3000', 'http://example.org']


def test_non_integer_env_value_is_config_error(clean_env, monkeypatch):
    monkeypatch.setenv('MATCH_THRESHOLD', 'high')
    with pytest.raises(ConfigError):
        Config.from_env(clean_env)


@pytest.mark.parametrize('overrides', [
    {'threshold': 101},
    {'threshold': -5},
    {'mode': 'fuzzy'},
    {'batch_size': 0},
    {'max_workers': 0},
    {'timeout': 0},
    {'output_format': 'xml'},
    {'name_column': ''},
])
def test_validate_rejects_bad_values(overrides):
    with pytest.raises(ConfigError):
        Config(**overrides).validate()


def test_validate_coerces_threshold_string():
    config = Config(threshold='90')
    config.validate()
    assert config.threshold == 90


def test_approval_date_defaults_to_today():
    assert Config().resolve_approval_date() == date.today().strftime('%d/%m/%Y')
    assert Config(date_format='%Y-%m-%d').resolve_approval_date() == date.today().isoformat()


def test_debug_details_only_in_development():
    assert not Config().debug_details
    assert Config(app_env='development').debug_details
