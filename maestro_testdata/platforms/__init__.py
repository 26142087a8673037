"""
Platform detection and defaults lookup.

Detects the target platform from the MAESTRO_TESTDATA_PLATFORM environment
variable (default: "android") and returns the compiled-in defaults for it.

Supported platforms:
- android: plain mode labels, no APP_MODE override
- ios: full mode descriptors, APP_MODE override
"""

import os
from typing import Callable, Optional

from ..models import PlatformDefaults

PLATFORM_ENV_VAR = "MAESTRO_TESTDATA_PLATFORM"
DEFAULT_PLATFORM = "android"
SUPPORTED_PLATFORMS = ("android", "ios")


def get_platform(get_env: Callable[[str], Optional[str]] = os.environ.get) -> str:
    """Return the current platform from MAESTRO_TESTDATA_PLATFORM.

    Defaults to "android" if not set or empty.
    """
    return get_env(PLATFORM_ENV_VAR) or DEFAULT_PLATFORM


def get_defaults(
    platform: str = None,
    get_env: Callable[[str], Optional[str]] = os.environ.get,
) -> PlatformDefaults:
    """Return the compiled-in defaults for a platform.

    When platform is omitted it is read through get_env, as in get_platform().
    """
    if platform is None:
        platform = get_platform(get_env)

    if platform == "android":
        from .android import DEFAULTS
        return DEFAULTS
    elif platform == "ios":
        from .ios import DEFAULTS
        return DEFAULTS
    else:
        raise ValueError(f"Unknown platform: {platform}")
