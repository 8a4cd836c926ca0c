# storefront/api/v1/cms.py
from flask import jsonify, request
from storefront.application.cms.page_versions import VersionStore
from storefront.application.cms.publish_page import publish_page_content
from storefront.application.cms.resolve_page import ensure_page, get_page
from storefront.domain.block_templates import list_templates
from storefront.normalizers.page import normalize_page
from storefront.normalizers.page_version import normalize_version
from . import v1_bp


def _version_limit():
    limit = request.args.get("limit", type=int)
    if limit is None or limit <= 0:
        return None
    return min(limit, 100)


# ------------------------
# Pages
# ------------------------

@v1_bp.route("/admin/pages/edit/<slug>", methods=["GET"])
def edit_page_by_slug(slug):
    page = ensure_page(slug)
    return jsonify(normalize_page(page, admin=True))

@v1_bp.route("/admin/pages/<page_id>", methods=["GET"])
def get_page_for_editing(page_id):
    page = get_page(page_id)
    return jsonify(normalize_page(page, admin=True))

@v1_bp.route("/admin/pages/<page_id>/content", methods=["PUT"])
def publish_content(page_id):
    data = request.get_json(silent=True) or {}

    if "blocks" not in data:
        return jsonify({"error": "blocks are required"}), 400

    page = publish_page_content(
        page_id=page_id,
        blocks=data["blocks"],
        meta=data.get("meta"),
    )

    return jsonify({
        "message": "Page saved successfully",
        "page": normalize_page(page, admin=True)
    }), 200


# ------------------------
# Versions
# ------------------------

@v1_bp.route("/admin/pages/<page_id>/versions", methods=["GET"])
def list_page_versions(page_id):
    get_page(page_id)
    store = VersionStore(page_id, limit=_version_limit())

    include_content = request.args.get("include_content") == "true"

    return jsonify([
        normalize_version(v, include_content=include_content)
        for v in store.versions
    ])

@v1_bp.route("/admin/pages/<page_id>/versions", methods=["POST"])
def create_page_version(page_id):
    data = request.get_json(silent=True) or {}

    if "content" not in data:
        return jsonify({"error": "content is required"}), 400

    store = VersionStore(page_id)
    version = store.create_version(
        data["content"],
        meta_title=data.get("meta_title"),
        description=data.get("description"),
        meta_image=data.get("meta_image"),
        created_by=data.get("created_by"),
    )

    return jsonify({
        "message": "Version saved",
        "version": normalize_version(version),
        "versions": [normalize_version(v) for v in store.versions]
    }), 201

@v1_bp.route("/admin/pages/<page_id>/versions/<version_id>/restore", methods=["POST"])
def restore_page_version(page_id, version_id):
    store = VersionStore(page_id)
    page = store.restore_version(version_id)

    return jsonify({
        "message": "Version restored successfully",
        "page": normalize_page(page, admin=True),
        "versions": [normalize_version(v) for v in store.versions]
    }), 200


# ------------------------
# Block templates
# ------------------------

@v1_bp.route("/admin/block-templates", methods=["GET"])
def list_block_templates():
    return jsonify(list_templates(request.args.get("category")))
