"""
iOS test data.

Environment variables:
- APP_MODE: selects the app mode ("lite" or "full", default: "lite").
  The value is used as-is; see resolver.resolve().
"""

from ..models import (
    AppModeDescriptor,
    MaestroTimeouts,
    PlatformDefaults,
    ReportingPaths,
    RichModeCatalog,
    TestSettings,
)
from .common import CREDENTIALS, ENVIRONMENTS, LOCATORS, NAVIGATION, PIN, USERS

APP_ID = "com.bitfinex.bfxdev"
DEFAULT_MODE = "lite"

# Timeouts (in ms)
TIMEOUT = 25000
DRIVER_TIMEOUT = 25000
ELEMENT_TIMEOUT = 8000
ANIMATION_TIMEOUT = 500

REPORTS_DIR = "reports/ios"

MODES = RichModeCatalog({
    "lite": AppModeDescriptor(
        name="Lite",
        selector="Lite.*",
        timeout=10000,
        features=("basic_trading", "wallet_view", "simple_navigation"),
    ),
    "full": AppModeDescriptor(
        name="Full",
        selector="Full.*",
        timeout=15000,
        features=(
            "advanced_trading",
            "full_wallet",
            "complete_navigation",
            "analytics",
            "advanced_orders",
        ),
    ),
})

DEFAULTS = PlatformDefaults(
    platform="ios",
    app_id=APP_ID,
    modes=MODES,
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
