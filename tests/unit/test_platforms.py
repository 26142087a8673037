"""Tests for platform detection and the compiled-in defaults."""

import pytest

from maestro_testdata.models import RichModeCatalog, SimpleModeCatalog
from maestro_testdata.platforms import SUPPORTED_PLATFORMS, get_defaults, get_platform


class TestGetPlatform:
    def test_default_android(self, make_env):
        assert get_platform(make_env({})) == "android"

    def test_empty_is_default(self, make_env):
        assert get_platform(make_env({"MAESTRO_TESTDATA_PLATFORM": ""})) == "android"

    def test_from_env(self, make_env):
        assert get_platform(make_env({"MAESTRO_TESTDATA_PLATFORM": "ios"})) == "ios"

    def test_real_environment(self, clean_env):
        clean_env.setenv("MAESTRO_TESTDATA_PLATFORM", "ios")
        assert get_platform() == "ios"


class TestGetDefaults:
    @pytest.mark.parametrize("platform", SUPPORTED_PLATFORMS)
    def test_supported(self, platform):
        assert get_defaults(platform).platform == platform

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown platform: windows"):
            get_defaults("windows")

    def test_uses_env_when_omitted(self, clean_env):
        clean_env.setenv("MAESTRO_TESTDATA_PLATFORM", "ios")
        assert get_defaults().app_id == "com.bitfinex.bfxdev"

    def test_uses_accessor_when_omitted(self, make_env):
        defaults = get_defaults(get_env=make_env({"MAESTRO_TESTDATA_PLATFORM": "ios"}))
        assert defaults.platform == "ios"

    def test_accessor_unknown_platform(self, make_env):
        with pytest.raises(ValueError, match="Unknown platform: web"):
            get_defaults(get_env=make_env({"MAESTRO_TESTDATA_PLATFORM": "web"}))


class TestAndroidDefaults:
    def test_app(self, android_defaults):
        assert android_defaults.app_id == "com.bitfinex.mobileapp.dev"
        assert isinstance(android_defaults.modes, SimpleModeCatalog)
        assert dict(android_defaults.modes.labels) == {"lite": "Lite", "full": "Full"}
        assert android_defaults.default_mode == "lite"

    def test_test_settings(self, android_defaults):
        settings = android_defaults.test_settings
        assert settings.timeout == 30000
        assert settings.maestro.driver_timeout == 30000
        assert settings.maestro.element_timeout == 10000
        assert settings.maestro.animation_timeout == 1000
        assert settings.reporting.output_dir == "reports/android"
        assert settings.reporting.screenshots_dir == "reports/android/screenshots"
        assert settings.reporting.videos_dir == "reports/android/videos"
        assert settings.reporting.xml_report == "reports/android/test-results.xml"


class TestIosDefaults:
    def test_app(self, ios_defaults):
        assert ios_defaults.app_id == "com.bitfinex.bfxdev"
        assert isinstance(ios_defaults.modes, RichModeCatalog)
        assert ios_defaults.modes.keys() == ("lite", "full")

    def test_mode_descriptors(self, ios_defaults):
        lite = ios_defaults.modes.descriptors["lite"]
        full = ios_defaults.modes.descriptors["full"]
        assert (lite.name, lite.selector, lite.timeout) == ("Lite", "Lite.*", 10000)
        assert lite.features == ("basic_trading", "wallet_view", "simple_navigation")
        assert (full.name, full.selector, full.timeout) == ("Full", "Full.*", 15000)
        assert full.features == (
            "advanced_trading",
            "full_wallet",
            "complete_navigation",
            "analytics",
            "advanced_orders",
        )

    def test_test_settings(self, ios_defaults):
        settings = ios_defaults.test_settings
        assert settings.timeout == 25000
        assert settings.maestro.driver_timeout == 25000
        assert settings.maestro.element_timeout == 8000
        assert settings.maestro.animation_timeout == 500
        assert settings.reporting.xml_report == "reports/ios/test-results.xml"


class TestSharedDefaults:
    def test_same_across_platforms(self, android_defaults, ios_defaults):
        assert android_defaults.credentials == ios_defaults.credentials
        assert android_defaults.navigation == ios_defaults.navigation
        assert android_defaults.pin == ios_defaults.pin
        assert android_defaults.locators == ios_defaults.locators
        assert android_defaults.users == ios_defaults.users
        assert android_defaults.environments == ios_defaults.environments

    def test_pin_policy(self, ios_defaults):
        pin = ios_defaults.pin
        assert pin.default_pin == "5"
        assert pin.length == 4
        assert pin.create_pin_text == "Create a 4-digit PIN"

    def test_key_sets(self, ios_defaults):
        assert set(ios_defaults.navigation) == {"continue", "signIn", "login", "menu", "profile"}
        assert set(ios_defaults.locators.login) == {
            "emailField", "apiKeyField", "secretKeyField", "apiKeyText", "keyText",
        }
        assert set(ios_defaults.locators.pin) == {
            "createPinText", "pinInput", "confirmButton", "continueButton",
        }
        assert set(ios_defaults.locators.dashboard) == {"wallet", "home", "dashboard"}

    def test_environments(self, ios_defaults):
        envs = ios_defaults.environments
        assert envs["development"].base_url == "https://dev-api.example.com"
        assert envs["development"].timeout == 10000
        assert envs["production"].base_url == "https://api.example.com"
        assert envs["production"].timeout == 20000
