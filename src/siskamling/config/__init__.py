import os


def get_settings_module() -> str:
    # Environment comes from APP_ENV, 'development' when unset
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "siskamling.config.production"

    if env in {"test", "testing"}:
        return "siskamling.config.testing"

    return "siskamling.config.development"
