from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Dict, Optional

from flask import current_app, jsonify, request, session

from ..admins.model import AdminSession
from ..core.exceptions import AuthenticationError, AuthorizationError, RemoteServiceError, ValidationError

logger = logging.getLogger(__name__)

SESSION_KEY = "admin"


def current_admin() -> Optional[AdminSession]:
    return AdminSession.from_session(session.get(SESSION_KEY))


def store_admin(admin: AdminSession) -> None:
    # replace the whole snapshot; never patch individual rights
    session[SESSION_KEY] = admin.to_session()


def clear_admin() -> None:
    session.pop(SESSION_KEY, None)


def request_data() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in {"1", "true", "yes", "on"}


def json_error(message: str, status: int):
    return jsonify({"status": "error", "message": message}), status


def api_view(view):
    """Translate domain errors into JSON responses.

    Local and remote permission denials both arrive as AuthorizationError and
    produce the same 403 body.
    """

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return json_error(str(e), 400)
        except AuthenticationError as e:
            return json_error(str(e), 401)
        except AuthorizationError as e:
            return json_error(str(e), 403)
        except RemoteServiceError as e:
            return json_error(str(e), 502)
        except Exception as e:
            logger.exception("Unhandled error in %s", view.__name__)
            if bool(current_app.config.get("DEBUG", False)):
                return json_error(f"Internal error: {e}", 500)
            return json_error("Internal error", 500)

    return wrapper
