"""Convert TestData into the structure Maestro flows read.

to_output() produces a plain dict with the camelCase field names the
flows reference (output.app.currentMode, output.locators.login.emailField,
...). render_script() wraps the same dict in a runScript-compatible
JavaScript file that assigns each section to `output`.
"""

import json
from typing import Any

from .models import (
    AppConfig,
    AppModeDescriptor,
    RichModeCatalog,
    TestData,
    TestSettings,
)

SECTIONS = ("bitfinex", "app", "testSettings", "locators", "users", "environments")


def serialize_mode(mode) -> Any:
    """Serialize a catalog entry: a descriptor dict or a plain label."""
    if isinstance(mode, AppModeDescriptor):
        return {
            "name": mode.name,
            "selector": mode.selector,
            "timeout": mode.timeout,
            "features": list(mode.features),
        }
    return mode


def serialize_app(app: AppConfig) -> dict[str, Any]:
    """Serialize the app section.

    currentMode is only emitted for catalogs that support the APP_MODE
    override; the Android flows never read it.
    """
    if isinstance(app.modes, RichModeCatalog):
        modes = app.modes.descriptors
    else:
        modes = app.modes.labels

    result: dict[str, Any] = {
        "appId": app.app_id,
        "modes": {key: serialize_mode(value) for key, value in modes.items()},
    }
    if app.supports_override:
        result["currentMode"] = app.current_mode
    result["navigation"] = dict(app.navigation)
    result["pin"] = {
        "defaultPin": app.pin.default_pin,
        "length": app.pin.length,
        "confirmText": app.pin.confirm_text,
        "successText": app.pin.success_text,
        "createPinText": app.pin.create_pin_text,
    }
    return result


def serialize_test_settings(settings: TestSettings) -> dict[str, Any]:
    return {
        "timeout": settings.timeout,
        "maestro": {
            "driverTimeout": settings.maestro.driver_timeout,
            "elementTimeout": settings.maestro.element_timeout,
            "animationTimeout": settings.maestro.animation_timeout,
        },
        "reporting": {
            "outputDir": settings.reporting.output_dir,
            "screenshotsDir": settings.reporting.screenshots_dir,
            "videosDir": settings.reporting.videos_dir,
            "xmlReport": settings.reporting.xml_report,
        },
    }


def to_output(data: TestData) -> dict[str, Any]:
    """Serialize a TestData into the six-section output dict."""
    return {
        "bitfinex": {
            "apiKey": data.bitfinex.api_key,
            "secretKey": data.bitfinex.secret_key,
        },
        "app": serialize_app(data.app),
        "testSettings": serialize_test_settings(data.test_settings),
        "locators": {
            "login": dict(data.locators.login),
            "pin": dict(data.locators.pin),
            "dashboard": dict(data.locators.dashboard),
        },
        "users": {
            label: {"email": user.email, "password": user.password}
            for label, user in data.users.items()
        },
        "environments": {
            label: {"baseUrl": env.base_url, "timeout": env.timeout}
            for label, env in data.environments.items()
        },
    }


def render_script(data: TestData, platform: str = "") -> str:
    """Render the output dict as a Maestro runScript file."""
    output = to_output(data)
    title = f"{platform} test data" if platform else "Test data"
    lines = [
        f"// {title} for Maestro tests",
        "// Generated by maestro-testdata; edit the Python defaults instead.",
        "",
    ]
    for section in SECTIONS:
        body = json.dumps(output[section], indent=4)
        lines.append(f"output.{section} = {body};")
        lines.append("")
    return "\n".join(lines)
