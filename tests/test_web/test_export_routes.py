from __future__ import annotations

import pytest

from sitecss.report import css_version
from sitecss.web.app import create_app


@pytest.fixture
def app(memory_source, fallback_tiers):
    return create_app(memory_source, tiers=fallback_tiers, flask_config={"TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()


class TestExportCSS:
    def test_serves_stylesheet(self, client) -> None:
        resp = client.get("/sites/site-1/export/css")
        assert resp.status_code == 200
        assert resp.mimetype == "text/css"
        assert resp.headers["Cache-Control"] == "public, max-age=3600, s-maxage=3600"
        assert resp.headers["X-Content-Type-Options"] == "nosniff"
        body = resp.get_data(as_text=True)
        assert body.startswith("/*\n * Site stylesheet: site-1\n")
        assert "@layer utilities {" in body

    def test_unknown_site(self, client) -> None:
        resp = client.get("/sites/nope/export/css")
        assert resp.status_code == 404
        assert resp.get_json() == {"error": "not found"}

    def test_all_tiers_fail(self, memory_source, failing_tier_factory) -> None:
        app = create_app(memory_source, tiers=[failing_tier_factory("primary")])
        resp = app.test_client().get("/sites/site-1/export/css")
        assert resp.status_code == 500
        assert resp.get_json() == {"error": "Failed to generate CSS"}

    def test_extensions(self, app, memory_source) -> None:
        assert app.extensions["site_source"] is memory_source
        assert app.extensions["export_pipeline"].source is memory_source


class TestDebug:
    def test_report(self, client) -> None:
        resp = client.get("/sites/site-1/export/css/debug")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["siteId"] == "site-1"
        assert "md:flex" in data["details"]["responsive"]
        assert "w-[320px]" in data["details"]["arbitrary"]
        assert data["summary"]["totalClasses"] == sum(data["summary"]["byCategory"].values())

    def test_unknown_site(self, client) -> None:
        assert client.get("/sites/nope/export/css/debug").status_code == 404


class TestVersion:
    def test_version(self, client) -> None:
        resp = client.get("/sites/site-1/export/css/version")
        assert resp.status_code == 200
        expected = css_version("site-1", ["2025-01-10T08:00:00Z", "2025-01-14T09:30:00Z"]).to_dict()
        assert resp.get_json() == expected
        assert expected["cache_url"].startswith("/sites/site-1/export/css?v=")

    def test_unknown_site(self, client) -> None:
        assert client.get("/sites/nope/export/css/version").status_code == 404
