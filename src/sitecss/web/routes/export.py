from __future__ import annotations

import logging

from flask import Blueprint, Response, current_app, jsonify

from sitecss.errors import CompilationError, SiteNotFoundError
from sitecss.report import build_report, css_version

logger = logging.getLogger(__name__)

export_bp = Blueprint("export", __name__)

CSS_HEADERS = {
    "Cache-Control": "public, max-age=3600, s-maxage=3600",
    "X-Content-Type-Options": "nosniff",
}


@export_bp.route("/<site_id>/export/css")
def export_css(site_id: str):
    """Serve the compiled stylesheet for a site."""
    pipeline = current_app.extensions["export_pipeline"]
    try:
        css = pipeline.export(site_id)
    except SiteNotFoundError:
        return jsonify({"error": "not found"}), 404
    except CompilationError:
        logger.exception("CSS export failed for site %s", site_id)
        return jsonify({"error": "Failed to generate CSS"}), 500
    return Response(css, mimetype="text/css", headers=CSS_HEADERS)


@export_bp.route("/<site_id>/export/css/debug")
def export_css_debug(site_id: str):
    """Coverage report: how every extracted class is categorized."""
    pipeline = current_app.extensions["export_pipeline"]
    try:
        content = pipeline.gather(site_id)
    except SiteNotFoundError:
        return jsonify({"error": "not found"}), 404
    extraction = pipeline.extractor.extract(content.markup_blobs())
    report = build_report(extraction.classes, site_id=site_id, generated_at=pipeline.clock())
    return jsonify(report.to_dict())


@export_bp.route("/<site_id>/export/css/version")
def export_css_version(site_id: str):
    """Version hash for cache busting; changes when site content changes."""
    source = current_app.extensions["site_source"]
    try:
        timestamps = source.fetch_updated_at(site_id)
    except SiteNotFoundError:
        return jsonify({"error": "not found"}), 404
    return jsonify(css_version(site_id, timestamps).to_dict())
