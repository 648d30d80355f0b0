import os


def get_settings_module() -> str:
    # Settings are picked by APP_ENV, defaulting to development.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "team_todo.config.production"

    if env in {"test", "testing"}:
        return "team_todo.config.testing"

    return "team_todo.config.development"
