"""
Unit tests for configuration management.
"""

import pytest
from unittest.mock import patch
import os

from pydantic import ValidationError

from causalog.models import ConsoleConfig


def test_settings_loads_from_environment():
    """Test that settings can be loaded from environment variables."""
    with patch.dict(os.environ, {
        'CAUSALOG_LOG_LEVEL': 'DEBUG',
        'CAUSALOG_LOG_JSON': 'false',
        'CAUSALOG_ERROR_TAMING': 'unsafe',
        'CAUSALOG_STACK_FILTERING': 'verbose',
        'CAUSALOG_WRAP_WITH_CAUSAL': 'true',
    }):
        from causalog.config import Settings
        settings = Settings()

        assert settings.log_level == 'DEBUG'
        assert settings.log_json is False
        assert settings.error_taming == 'unsafe'
        assert settings.stack_filtering == 'verbose'
        assert settings.wrap_with_causal is True


def test_settings_has_default_values():
    """Test that settings have appropriate default values."""
    with patch.dict(os.environ, {}, clear=True):
        from causalog.config import Settings
        settings = Settings(_env_file=None)

        assert settings.log_level == 'INFO'
        assert settings.log_json is True
        assert settings.error_taming == 'safe'
        assert settings.stack_filtering == 'concise'
        assert settings.wrap_with_causal is False


def test_settings_rejects_unknown_taming():
    """Test invalid switch values are refused."""
    with patch.dict(os.environ, {'CAUSALOG_ERROR_TAMING': 'lenient'}):
        from causalog.config import Settings
        with pytest.raises(ValidationError):
            Settings()


def test_settings_build_console_config():
    """Test settings produce the matching console configuration."""
    with patch.dict(os.environ, {'CAUSALOG_WRAP_WITH_CAUSAL': '1'}):
        from causalog.config import Settings
        config = Settings().console_config()

        assert isinstance(config, ConsoleConfig)
        assert config.wrap_with_causal is True
        assert config.error_taming == 'safe'


def test_console_config_defaults_and_aliases():
    """Test console configuration defaults and camelCase aliases."""
    assert ConsoleConfig() == ConsoleConfig(error_taming='safe', stack_filtering='concise', wrap_with_causal=False)

    config = ConsoleConfig(stackFiltering='verbose', wrapWithCausal=True)
    assert config.stack_filtering == 'verbose'
    assert config.wrap_with_causal is True


def test_console_config_is_frozen():
    """Test console configuration cannot change after construction."""
    config = ConsoleConfig()

    with pytest.raises(ValidationError):
        config.wrap_with_causal = True
