from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import Container, build_container
from .admins.controller import register as register_admins
from .branches.controller import register as register_branches
from .staff.controller import register as register_staff
from .status.controller import register as register_status

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SCRIPT_URL"] = getattr(settings, "SCRIPT_URL", "")
    app.config["REQUEST_TIMEOUT"] = float(getattr(settings, "REQUEST_TIMEOUT", 30))
    app.config["FALLBACK_PHOTO_URL"] = getattr(settings, "FALLBACK_PHOTO_URL", "")

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("settings=%s script=%s", settings_module, app.config["SCRIPT_URL"] or "<unset>")

    if container is None:
        container = build_container(script_url=app.config["SCRIPT_URL"], timeout=app.config["REQUEST_TIMEOUT"])

    register_admins(app, container)
    register_branches(app, container)
    register_staff(app, container)
    register_status(app, container)

    return app


if __name__ == "__main__":
    create_app().run()
