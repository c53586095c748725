from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import api_view, as_bool, clear_admin, current_admin, request_data, store_admin
from ..container import Container
from ..core.exceptions import AuthenticationError, ValidationError


def _permission_args(data: dict) -> dict:
    rights = data.get("rights") or {}
    branches = data.get("branches") or []
    if not isinstance(rights, dict) or not isinstance(branches, list):
        raise ValidationError("Invalid permissions.")
    return {"rights": rights, "branches": branches, "is_super_admin": as_bool(data.get("isSuperAdmin"))}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    @api_view
    def login():
        data = request_data()
        admin = container.auth_service.login(str(data.get("email", "")), str(data.get("password", "")))
        store_admin(admin)
        return jsonify({"status": "success", "verified": True, "email": admin.email, **admin.permissions.to_payload()})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    @api_view
    def logout():
        admin = current_admin()
        clear_admin()
        container.auth_service.logout(admin)
        return jsonify({"status": "success"})

    @app.route("/api/session", methods=["GET"], endpoint="current_session")
    @api_view
    def current_session():
        admin = current_admin()
        if admin is None:
            return jsonify({"status": "success", "isAdmin": False})
        return jsonify({"status": "success", "isAdmin": True, "email": admin.email, **admin.permissions.to_payload()})

    @app.route("/api/session/refresh", methods=["POST"], endpoint="refresh_session")
    @api_view
    def refresh_session():
        try:
            admin = container.auth_service.refresh(current_admin())
        except AuthenticationError:
            clear_admin()
            raise
        store_admin(admin)
        return jsonify({"status": "success", "email": admin.email, **admin.permissions.to_payload()})

    @app.route("/api/password", methods=["POST"], endpoint="change_password")
    @api_view
    def change_password():
        data = request_data()
        message = container.auth_service.change_password(
            current_admin(),
            current_password=str(data.get("currentPassword", "")),
            new_password=str(data.get("newPassword", "")),
        )
        return jsonify({"status": "success", "message": message})

    @app.route("/api/admins", methods=["GET"], endpoint="list_admins")
    @api_view
    def list_admins():
        admins = container.admin_service.list_admins(current_admin())
        return jsonify({"status": "success", "data": [a.to_dict() for a in admins]})

    @app.route("/api/admins", methods=["POST"], endpoint="add_admin")
    @api_view
    def add_admin():
        data = request_data()
        message = container.admin_service.add_admin(
            current_admin(),
            email=str(data.get("email", "")),
            password=str(data.get("password", "")),
            **_permission_args(data),
        )
        return jsonify({"status": "success", "message": message}), 201

    @app.route("/api/admins/<email>", methods=["DELETE"], endpoint="delete_admin")
    @api_view
    def delete_admin(email: str):
        message = container.admin_service.delete_admin(current_admin(), email=email)
        return jsonify({"status": "success", "message": message})

    @app.route("/api/admins/<email>/permissions", methods=["PUT"], endpoint="update_admin_permissions")
    @api_view
    def update_admin_permissions(email: str):
        data = request_data()
        message = container.admin_service.update_permissions(current_admin(), email=email, **_permission_args(data))
        return jsonify({"status": "success", "message": message})
