from __future__ import annotations

import base64
from typing import Any, Optional

from flask import Flask, jsonify, request
from werkzeug.utils import secure_filename

from ..common.validators import parse_row_index
from ..common.web import api_view, as_bool, current_admin, request_data
from ..container import Container
from ..core.exceptions import ValidationError
from .model import PhotoUpload


def _photo_from_request(data: dict) -> Optional[PhotoUpload]:
    upload = request.files.get("photo")
    if upload and upload.filename:
        raw = upload.read()
        if not raw:
            return None
        mimetype = upload.mimetype or "application/octet-stream"
        encoded = base64.b64encode(raw).decode("ascii")
        return PhotoUpload(base64=f"data:{mimetype};base64,{encoded}", name=secure_filename(upload.filename))

    photo: Any = data.get("photo")
    if isinstance(photo, dict) and photo.get("base64"):
        name = secure_filename(str(photo.get("name") or "photo")) or "photo"
        return PhotoUpload(base64=str(photo["base64"]), name=name)
    if photo:
        raise ValidationError("Invalid photo.")
    return None


def register(app: Flask, container: Container) -> None:
    @app.route("/api/branches/<branch_name>/staff", methods=["POST"], endpoint="save_staff")
    @api_view
    def save_staff(branch_name: str):
        data = request_data()
        row = data.get("rowIndex")
        row_index = parse_row_index(row) if row not in (None, "") else None
        message = container.staff_service.save_staff(
            current_admin(),
            branch_name=branch_name,
            fields=data,
            row_index=row_index,
            is_former=as_bool(data.get("isFormer")),
            photo=_photo_from_request(data),
        )
        return jsonify({"status": "success", "message": message})

    @app.route("/api/branches/<branch_name>/staff/<row_index>", methods=["DELETE"], endpoint="delete_staff")
    @api_view
    def delete_staff(branch_name: str, row_index: str):
        message = container.staff_service.delete_staff(
            current_admin(),
            branch_name=branch_name,
            row_index=parse_row_index(row_index),
        )
        return jsonify({"status": "success", "message": message})

    @app.route("/api/branches/<branch_name>/staff/<row_index>/move", methods=["POST"], endpoint="move_staff")
    @api_view
    def move_staff(branch_name: str, row_index: str):
        data = request_data()
        message = container.staff_service.move_staff(
            current_admin(),
            from_branch=branch_name,
            to_branch=str(data.get("toBranch", "")),
            row_index=parse_row_index(row_index),
        )
        return jsonify({"status": "success", "message": message})
