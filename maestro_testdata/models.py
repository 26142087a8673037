"""Value objects for the Maestro test data.

Every object here is built once and never mutated. Mappings are exposed
through read-only proxies and sequences as tuples, so a resolved
TestData can be handed to the test runner without copying.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Union


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class Credentials:
    """Opaque API key pair, passed through verbatim."""

    api_key: str
    secret_key: str


@dataclass(frozen=True)
class AppModeDescriptor:
    """One operating mode of the app under test."""

    name: str
    selector: str  # regex matched against on-screen text
    timeout: int  # ms
    features: tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "features", tuple(self.features))

    def has_feature(self, feature: str) -> bool:
        return feature in self.features


@dataclass(frozen=True)
class SimpleModeCatalog:
    """Mode key -> display label. No override support."""

    labels: Mapping[str, str]

    def __post_init__(self):
        object.__setattr__(self, "labels", _frozen(self.labels))

    def keys(self) -> tuple[str, ...]:
        return tuple(self.labels)

    def __contains__(self, mode: str) -> bool:
        return mode in self.labels


@dataclass(frozen=True)
class RichModeCatalog:
    """Mode key -> full descriptor. Selected mode can be overridden."""

    descriptors: Mapping[str, AppModeDescriptor]

    def __post_init__(self):
        object.__setattr__(self, "descriptors", _frozen(self.descriptors))

    def keys(self) -> tuple[str, ...]:
        return tuple(self.descriptors)

    def __contains__(self, mode: str) -> bool:
        return mode in self.descriptors


ModeCatalog = Union[SimpleModeCatalog, RichModeCatalog]


@dataclass(frozen=True)
class PinPolicy:
    default_pin: str
    length: int
    confirm_text: str
    success_text: str
    create_pin_text: str


@dataclass(frozen=True)
class AppConfig:
    """Resolved application section."""

    app_id: str
    modes: ModeCatalog
    current_mode: str
    navigation: Mapping[str, str]
    pin: PinPolicy

    def __post_init__(self):
        object.__setattr__(self, "navigation", _frozen(self.navigation))

    @property
    def supports_override(self) -> bool:
        return isinstance(self.modes, RichModeCatalog)

    def current_descriptor(self) -> Optional[AppModeDescriptor]:
        """Descriptor for current_mode, or None.

        None is returned for simple catalogs and for mode keys that are
        not in the catalog (an unvalidated APP_MODE value, for instance).
        """
        if not isinstance(self.modes, RichModeCatalog):
            return None
        return self.modes.descriptors.get(self.current_mode)


@dataclass(frozen=True)
class MaestroTimeouts:
    driver_timeout: int
    element_timeout: int
    animation_timeout: int


@dataclass(frozen=True)
class ReportingPaths:
    output_dir: str
    screenshots_dir: str
    videos_dir: str
    xml_report: str


@dataclass(frozen=True)
class TestSettings:
    __test__ = False  # not a pytest class

    timeout: int
    maestro: MaestroTimeouts
    reporting: ReportingPaths


@dataclass(frozen=True)
class LocatorSet:
    """Logical role name -> UI element identifier, per screen."""

    login: Mapping[str, str]
    pin: Mapping[str, str]
    dashboard: Mapping[str, str]

    def __post_init__(self):
        for name in ("login", "pin", "dashboard"):
            object.__setattr__(self, name, _frozen(getattr(self, name)))


@dataclass(frozen=True)
class UserCredential:
    email: str
    password: str


@dataclass(frozen=True)
class EnvironmentTarget:
    base_url: str
    timeout: int  # ms


@dataclass(frozen=True)
class PlatformDefaults:
    """Compiled-in values for one platform variant."""

    platform: str
    app_id: str
    modes: ModeCatalog
    navigation: Mapping[str, str]
    pin: PinPolicy
    test_settings: TestSettings
    credentials: Credentials
    locators: LocatorSet
    users: Mapping[str, UserCredential]
    environments: Mapping[str, EnvironmentTarget]
    default_mode: str = "lite"

    def __post_init__(self):
        for name in ("navigation", "users", "environments"):
            object.__setattr__(self, name, _frozen(getattr(self, name)))


@dataclass(frozen=True)
class TestData:
    """The full structure handed to the test runner."""

    __test__ = False  # not a pytest class

    bitfinex: Credentials
    app: AppConfig
    test_settings: TestSettings
    locators: LocatorSet
    users: Mapping[str, UserCredential]
    environments: Mapping[str, EnvironmentTarget]

    def __post_init__(self):
        for name in ("users", "environments"):
            object.__setattr__(self, name, _frozen(getattr(self, name)))

    def current_descriptor(self) -> Optional[AppModeDescriptor]:
        return self.app.current_descriptor()

    def environment(self, name: str) -> EnvironmentTarget:
        try:
            return self.environments[name]
        except KeyError:
            raise KeyError(
                f"Unknown environment: {name} (available: {', '.join(self.environments)})"
            ) from None
