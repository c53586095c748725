import os


def get_settings_module() -> str:
    # APP_ENV chọn môi trường, mặc định là 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "staff_directory.config.production"

    if env in {"test", "testing"}:
        return "staff_directory.config.testing"

    return "staff_directory.config.development"
