"""
Android test data.

The Android build has a fixed mode catalog of plain labels. APP_MODE is
not consulted; the selected mode is always DEFAULT_MODE.
"""

from ..models import (
    MaestroTimeouts,
    PlatformDefaults,
    ReportingPaths,
    SimpleModeCatalog,
    TestSettings,
)
from .common import CREDENTIALS, ENVIRONMENTS, LOCATORS, NAVIGATION, PIN, USERS

APP_ID = "com.bitfinex.mobileapp.dev"
DEFAULT_MODE = "lite"

# Timeouts (in ms)
TIMEOUT = 30000
DRIVER_TIMEOUT = 30000
ELEMENT_TIMEOUT = 10000
ANIMATION_TIMEOUT = 1000

REPORTS_DIR = "reports/android"

DEFAULTS = PlatformDefaults(
    platform="android",
    app_id=APP_ID,
    modes=SimpleModeCatalog({"lite": "Lite", "full": "Full"}),
    default_mode=DEFAULT_MODE,
    navigation=NAVIGATION,
    pin=PIN,
    test_settings=TestSettings(
        timeout=TIMEOUT,
        maestro=MaestroTimeouts(
            driver_timeout=DRIVER_TIMEOUT,
            element_timeout=ELEMENT_TIMEOUT,
            animation_timeout=ANIMATION_TIMEOUT,
        ),
        reporting=ReportingPaths(
            output_dir=REPORTS_DIR,
            screenshots_dir=f"{REPORTS_DIR}/screenshots",
            videos_dir=f"{REPORTS_DIR}/videos",
            xml_report=f"{REPORTS_DIR}/test-results.xml",
        ),
    ),
    credentials=CREDENTIALS,
    locators=LOCATORS,
    users=USERS,
    environments=ENVIRONMENTS,
)
