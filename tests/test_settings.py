import logging
import pytest
import sys
import os

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from gearbox_pricing.config.logging_config import configure_logging
from gearbox_pricing.config.settings import Settings, get_settings


def test_defaults():
    settings = Settings.load()
    assert settings.prefix_lengths == (6, 5, 4, 3, 2)
    assert settings.default_rule_key == 'default'
    assert settings.market_markup_floor == 1.05
    assert settings.market_markup_ceiling == 1.30


def test_prefix_lengths_sorted_longest_first():
    settings = Settings.load(prefix_lengths=[2, 4, 3, 4])
    assert settings.prefix_lengths == (4, 3, 2)


def test_unknown_setting_rejected():
    with pytest.raises(TypeError):
        Settings.load(currency='EUR')


def test_settings_are_frozen():
    with pytest.raises(AttributeError):
        get_settings().log_level = 'DEBUG'


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_configure_logging_sets_package_level():
    configure_logging("DEBUG")
    assert logging.getLogger("gearbox_pricing").level == logging.DEBUG
    configure_logging("INFO")
    assert logging.getLogger("gearbox_pricing").level == logging.INFO
