from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import api_view, current_admin
from ..container import Container
from ..core.enums import TenureCategory
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/staff-status", methods=["GET"], endpoint="staff_status")
    @api_view
    def staff_status():
        category = None
        raw = request.args.get("category", "").strip().upper()
        if raw:
            try:
                category = TenureCategory(raw)
            except ValueError:
                raise ValidationError("Invalid status category.")

        admin = current_admin()
        branches = container.directory_service.load_branches() if admin else []
        rows = container.status_service.staff_status(admin, branches, category=category)

        term = request.args.get("q", "").strip().lower()
        if term:
            rows = [r for r in rows if term in r.full_name.lower() or term in r.designation.lower() or term in r.elapsed_text.lower()]
        return jsonify({"status": "success", "data": [r.to_dict() for r in rows]})
