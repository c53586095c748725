from __future__ import annotations

from flask import Flask, current_app, jsonify, request

from ..common.web import api_view, current_admin, request_data
from ..container import Container
from ..core.enums import Capability
from ..permissions.evaluator import has_capability


def _branch_json(branch, *, show_former: bool, fallback_photo_url: str) -> dict:
    former = [s.to_dict(fallback_photo_url=fallback_photo_url) for s in branch.former_staff]
    return {
        "branchName": branch.branch_name,
        "currentStaff": [s.to_dict(fallback_photo_url=fallback_photo_url) for s in branch.current_staff],
        # former staff is public only when there is some; admins always see the section
        "formerStaff": former if (former or show_former) else None,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/branches", methods=["GET"], endpoint="list_branches")
    @api_view
    def list_branches():
        admin = current_admin()
        fallback = current_app.config.get("FALLBACK_PHOTO_URL", "")
        branches = container.directory_service.load_branches()
        return jsonify(
            {
                "status": "success",
                "data": [_branch_json(b, show_former=admin is not None, fallback_photo_url=fallback) for b in branches],
                "canAddBranch": has_capability(admin.permissions if admin else None, Capability.ADD_BRANCH),
            }
        )

    @app.route("/api/branches/<branch_name>/search", methods=["GET"], endpoint="search_branch")
    @api_view
    def search_branch(branch_name: str):
        fallback = current_app.config.get("FALLBACK_PHOTO_URL", "")
        branch = container.directory_service.get_branch(branch_name)
        found = container.directory_service.search_branch(branch, request.args.get("q", ""))
        return jsonify({"status": "success", "data": [s.to_dict(fallback_photo_url=fallback) for s in found]})

    @app.route("/api/branches", methods=["POST"], endpoint="add_branch")
    @api_view
    def add_branch():
        data = request_data()
        message = container.branch_service.add_branch(current_admin(), data.get("branchName", ""))
        return jsonify({"status": "success", "message": message}), 201

    @app.route("/api/branches/<branch_name>", methods=["DELETE"], endpoint="delete_branch")
    @api_view
    def delete_branch(branch_name: str):
        message = container.branch_service.delete_branch(current_admin(), branch_name)
        return jsonify({"status": "success", "message": message})

    @app.route("/api/branches/<branch_name>", methods=["PATCH"], endpoint="rename_branch")
    @api_view
    def rename_branch(branch_name: str):
        data = request_data()
        message = container.branch_service.rename_branch(current_admin(), branch_name, data.get("newName", ""))
        return jsonify({"status": "success", "message": message})
