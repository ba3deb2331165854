import os

_SETTINGS_BY_ENV = {
    "dev": "config.development",
    "development": "config.development",
    "test": "config.testing",
    "testing": "config.testing",
    "prod": "config.production",
    "production": "config.production",
}


def get_settings_module() -> str:
    """Settings module named by APP_ENV (default 'development')."""
    env = os.getenv("APP_ENV", "development").strip().lower()
    try:
        return _SETTINGS_BY_ENV[env]
    except KeyError:
        raise ValueError(f"Unknown APP_ENV {env!r}; expected one of {sorted(_SETTINGS_BY_ENV)}")
