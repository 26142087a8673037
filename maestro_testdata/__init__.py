"""Platform test data for Maestro mobile UI flows."""

from .errors import TestDataError, UnknownModeError
from .models import (
    AppConfig,
    AppModeDescriptor,
    Credentials,
    EnvironmentTarget,
    LocatorSet,
    MaestroTimeouts,
    ModeCatalog,
    PinPolicy,
    PlatformDefaults,
    ReportingPaths,
    RichModeCatalog,
    SimpleModeCatalog,
    TestData,
    TestSettings,
    UserCredential,
)
from .platforms import SUPPORTED_PLATFORMS, get_defaults, get_platform
from .resolver import APP_MODE_ENV_VAR, build_testdata, resolve
from .serializers import render_script, to_output

__version__ = "0.1.0"

__all__ = [
    "APP_MODE_ENV_VAR", "SUPPORTED_PLATFORMS",
    "AppConfig", "AppModeDescriptor", "Credentials", "EnvironmentTarget",
    "LocatorSet", "MaestroTimeouts", "ModeCatalog", "PinPolicy",
    "PlatformDefaults", "ReportingPaths", "RichModeCatalog",
    "SimpleModeCatalog", "TestData", "TestSettings", "UserCredential",
    "TestDataError", "UnknownModeError",
    "build_testdata", "get_defaults", "get_platform", "render_script",
    "resolve", "to_output",
]
