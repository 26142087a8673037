"""Values shared by every platform variant."""

from ..models import (
    Credentials,
    EnvironmentTarget,
    LocatorSet,
    PinPolicy,
    UserCredential,
)

# Bitfinex API credentials (opaque, used only to fill the login form)
CREDENTIALS = Credentials(
    api_key="ea69b2a8517ac37c1499207741c2392566d28a9d880",
    secret_key="06ecd3c6b560b32003451f244cb302c258eb5ebcd82",
)

NAVIGATION = {
    "continue": "Continue",
    "signIn": "Sign in",
    "login": "Login",
    "menu": "Menu",
    "profile": "Profile",
}

PIN = PinPolicy(
    default_pin="5",
    length=4,
    confirm_text="Confirm PIN",
    success_text="PIN created successfully",
    create_pin_text="Create a 4-digit PIN",
)

LOCATORS = LocatorSet(
    login={
        "emailField": "login_email",
        "apiKeyField": "Login-Public-Key-Input",
        "secretKeyField": "Login-Secret-Key-Input",
        "apiKeyText": "API Key",
        "keyText": "Key",
    },
    pin={
        "createPinText": "Create a 4-digit PIN",
        "pinInput": "pin_input",
        "confirmButton": "Confirm",
        "continueButton": "Continue",
    },
    dashboard={
        "wallet": "Wallet",
        "home": "Home",
        "dashboard": "Dashboard",
    },
)

USERS = {
    "testUser": UserCredential(email="test@example.com", password="testpassword123"),
    "demoUser": UserCredential(email="demo@example.com", password="demopassword456"),
}

# Timeouts in ms
ENVIRONMENTS = {
    "development": EnvironmentTarget(base_url="https://dev-api.example.com", timeout=10000),
    "staging": EnvironmentTarget(base_url="https://staging-api.example.com", timeout=15000),
    "production": EnvironmentTarget(base_url="https://api.example.com", timeout=20000),
}
