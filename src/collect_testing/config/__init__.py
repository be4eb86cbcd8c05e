"""Tester configuration and suite settings."""

from collect_testing.config.settings import SuiteSettings, load_settings
from collect_testing.config.tester import ListTesterConfig
from collect_testing.config.validators import to_configuration_error

__all__ = [
    "ListTesterConfig",
    "SuiteSettings",
    "load_settings",
    "to_configuration_error",
]
