# storefront/api/v1/pages.py
from flask import Response, jsonify
from storefront.application.cms.resolve_page import (
    load_page_blocks,
    resolve_home_page,
    resolve_page,
)
from storefront.rendering import render_blocks
from . import v1_bp

# ------------------------
# Public page resolution
# ------------------------

@v1_bp.route("/home", methods=["GET"])
def get_home_page():
    return jsonify(resolve_home_page())

@v1_bp.route("/pages/<slug>", methods=["GET"])
def get_page(slug):
    return jsonify(resolve_page(slug))

@v1_bp.route("/pages/<slug>/html", methods=["GET"])
def render_page(slug):
    page = resolve_page(slug)
    return Response(render_blocks(page["blocks"]), mimetype="text/html")

@v1_bp.route("/pages/<slug>/blocks", methods=["GET"])
def get_page_blocks(slug):
    # System pages render optional blocks; a missing page is not an error
    return jsonify(load_page_blocks(slug))
