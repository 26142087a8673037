"""Resolve compiled-in defaults into the structure handed to Maestro.

The only external input is the environment, read through a get_env(name)
accessor so callers (and tests) can supply their own. os.environ.get is
used when none is given.
"""

import logging
import os
from typing import Callable, Optional

from .errors import UnknownModeError
from .models import AppConfig, PlatformDefaults, RichModeCatalog, TestData
from .platforms import get_defaults, get_platform

logger = logging.getLogger("maestro_testdata.resolver")

APP_MODE_ENV_VAR = "APP_MODE"

GetEnv = Callable[[str], Optional[str]]


def resolve(
    defaults: PlatformDefaults,
    environment_override: Optional[str] = None,
    strict: bool = False,
) -> AppConfig:
    """Build the app section, selecting the current mode.

    For a rich catalog a non-empty override is taken verbatim, even when
    it is not a key of the catalog. None or "" falls back to the default
    mode. A simple catalog ignores the override entirely.

    With strict=True an override outside a rich catalog raises
    UnknownModeError instead of being passed through.
    """
    if isinstance(defaults.modes, RichModeCatalog) and environment_override:
        if strict and environment_override not in defaults.modes:
            raise UnknownModeError(environment_override, defaults.modes.keys())
        current_mode = environment_override
        source = APP_MODE_ENV_VAR
    else:
        current_mode = defaults.default_mode
        source = "default"

    logger.debug(
        "Resolved %s app mode %r (from %s)", defaults.platform, current_mode, source
    )
    return AppConfig(
        app_id=defaults.app_id,
        modes=defaults.modes,
        current_mode=current_mode,
        navigation=defaults.navigation,
        pin=defaults.pin,
    )


def build_testdata(
    platform: Optional[str] = None,
    get_env: GetEnv = os.environ.get,
    strict: bool = False,
    mode: Optional[str] = None,
) -> TestData:
    """Assemble every section of the test data for one platform.

    Args:
        platform: "android" or "ios". Read from MAESTRO_TESTDATA_PLATFORM
            when omitted.
        get_env: Environment accessor, called with a variable name.
        strict: Reject APP_MODE values that are not in the mode catalog.
        mode: Explicit mode override; takes precedence over APP_MODE.

    Returns:
        A new, fully populated TestData.
    """
    if platform is None:
        platform = get_platform(get_env)
    defaults = get_defaults(platform, get_env)

    override = mode if mode else get_env(APP_MODE_ENV_VAR)
    app = resolve(defaults, override, strict=strict)

    return TestData(
        bitfinex=defaults.credentials,
        app=app,
        test_settings=defaults.test_settings,
        locators=defaults.locators,
        users=defaults.users,
        environments=defaults.environments,
    )
