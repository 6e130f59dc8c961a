"""Tests for inject_env.py."""

import json

import pytest

from inject_env import (
    REDIRECTS,
    SCRIPT_TAG,
    InjectionError,
    inject_script_tag,
    main,
    patch_html_files,
    render_env_js,
    substitute_placeholders,
)


@pytest.fixture
def supabase_env(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://test.supabase.co")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "test-anon-key")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "super-secret-service-key")
    monkeypatch.setenv("ENVIRONMENT", "production")


class TestRenderEnvJs:
    def test_contains_public_values(self):
        js = render_env_js("https://test.supabase.co", "anon", "aicurator_auth_prod")
        assert '"NEXT_PUBLIC_SUPABASE_URL": "https://test.supabase.co"' in js
        assert '"NEXT_PUBLIC_SUPABASE_ANON_KEY": "anon"' in js
        assert 'window.__SUPABASE_STORAGE_KEY = "aicurator_auth_prod"' in js

    def test_values_are_escaped(self):
        js = render_env_js('https://x.co/"; alert(1); "', "anon", "k")
        assert json.dumps('https://x.co/"; alert(1); "') in js


class TestSubstitutePlaceholders:
    def test_fills_placeholders(self):
        template = "window.ENV = {url: '%NEXT_PUBLIC_SUPABASE_URL%', key: '%NEXT_PUBLIC_SUPABASE_ANON_KEY%'};"
        result = substitute_placeholders(template, "https://test.supabase.co", "anon")
        assert result == "window.ENV = {url: 'https://test.supabase.co', key: 'anon'};"

    @pytest.mark.parametrize("template", [
        "key: '%SUPABASE_SERVICE_ROLE_KEY%'",
        "role: 'service_role'",
    ])
    def test_rejects_service_role_references(self, template):
        with pytest.raises(InjectionError):
            substitute_placeholders(template, "u", "k")


class TestInjectScriptTag:
    def test_before_head_end(self):
        html = "<html><head><title>x</title></HEAD><body></body></html>"
        assert inject_script_tag(html) == f"<html><head><title>x</title>{SCRIPT_TAG}</HEAD><body></body></html>"

    def test_non_ascii_text_before_head_end(self):
        html = "<html><head><title>İstanbul</title></head><body></body></html>"
        assert inject_script_tag(html) == (
            f"<html><head><title>İstanbul</title>{SCRIPT_TAG}</head><body></body></html>"
        )

    def test_before_first_script_without_head(self):
        html = '<div></div><script src="/app.js"></script>'
        assert inject_script_tag(html) == f'<div></div>{SCRIPT_TAG}<script src="/app.js"></script>'

    def test_prepended_otherwise(self):
        assert inject_script_tag("<p>hi</p>") == SCRIPT_TAG + "<p>hi</p>"

    def test_already_present(self):
        assert inject_script_tag(f"<head>{SCRIPT_TAG}</head>") is None


class TestPatchHtmlFiles:
    def test_patches_nested_pages_once(self, tmp_path):
        (tmp_path / "index.html").write_text("<head></head>", encoding="utf-8")
        (tmp_path / "art").mkdir()
        (tmp_path / "art" / "detail.html").write_text("<head></head>", encoding="utf-8")
        (tmp_path / "done.html").write_text(f"<head>{SCRIPT_TAG}</head>", encoding="utf-8")

        patched, skipped = patch_html_files(tmp_path)

        assert len(patched) == 2
        assert skipped == [tmp_path / "done.html"]
        assert SCRIPT_TAG in (tmp_path / "art" / "detail.html").read_text(encoding="utf-8")

        patched_again, _ = patch_html_files(tmp_path)
        assert patched_again == []


class TestMain:
    def test_missing_out_dir(self, tmp_path, supabase_env):
        assert main(["--out", str(tmp_path / "missing")]) == 1

    def test_writes_export(self, tmp_path, supabase_env):
        out = tmp_path / "out"
        out.mkdir()
        (out / "index.html").write_text("<html><head></head></html>", encoding="utf-8")

        assert main(["--out", str(out), "--public", str(tmp_path / "public")]) == 0

        env_js = (out / "env.js").read_text(encoding="utf-8")
        assert "https://test.supabase.co" in env_js
        assert "test-anon-key" in env_js
        assert "aicurator_auth_prod" in env_js
        assert "super-secret-service-key" not in env_js
        assert SCRIPT_TAG in (out / "index.html").read_text(encoding="utf-8")
        assert (out / "_redirects").read_text(encoding="utf-8") == REDIRECTS

    def test_uses_template(self, tmp_path, supabase_env):
        out = tmp_path / "out"
        public = tmp_path / "public"
        out.mkdir()
        public.mkdir()
        (public / "env.js").write_text("window.ENV = '%NEXT_PUBLIC_SUPABASE_URL%';", encoding="utf-8")

        assert main(["--out", str(out), "--public", str(public)]) == 0
        assert (out / "env.js").read_text(encoding="utf-8") == "window.ENV = 'https://test.supabase.co';"

    def test_unsafe_template(self, tmp_path, supabase_env):
        out = tmp_path / "out"
        public = tmp_path / "public"
        out.mkdir()
        public.mkdir()
        (public / "env.js").write_text("key = '%SUPABASE_SERVICE_ROLE_KEY%';", encoding="utf-8")

        assert main(["--out", str(out), "--public", str(public)]) == 1
        assert not (out / "env.js").exists()
