import os


def get_settings_module() -> str:
    # Settings module is chosen from APP_ENV, defaulting to development
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "hr_console.config.production"

    if env in {"test", "testing"}:
        return "hr_console.config.testing"

    return "hr_console.config.development"
