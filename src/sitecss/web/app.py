from __future__ import annotations

from typing import Sequence

from flask import Flask

from sitecss.config import SiteCSSConfig
from sitecss.pipeline import CSSExportPipeline
from sitecss.sources import InMemorySiteSource, SiteSource
from sitecss.tiers import Tier


def create_app(
    source: SiteSource | None = None,
    config: SiteCSSConfig | None = None,
    *,
    tiers: Sequence[Tier] | None = None,
    flask_config: dict | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(flask_config or {})

    config = config or SiteCSSConfig()
    if source is None:
        source = InMemorySiteSource()

    # Store source and pipeline on app for access in routes
    app.extensions["sitecss_config"] = config
    app.extensions["site_source"] = source
    app.extensions["export_pipeline"] = CSSExportPipeline(source, config, tiers=tiers)

    # Register blueprints
    from sitecss.web.routes.export import export_bp

    app.register_blueprint(export_bp, url_prefix="/sites")

    return app
