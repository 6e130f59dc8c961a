#!/usr/bin/env python3
"""
Runtime environment injection for the static front-end export.

Writes env.js (a window.ENV assignment holding the public Supabase URL and
anon key) into the export directory, adds a script tag for it to every
HTML page and writes the _redirects file used for client-side routing.

Usage:
    python inject_env.py                        # ./out, template from ./public
    python inject_env.py --out dist --public web

Configuration:
    SUPABASE_URL and SUPABASE_ANON_KEY from the environment or .env.
    Only these public values are ever written; a template that mentions
    the service-role key is rejected.
"""

import argparse
import json
import re
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from shared.config import get_settings

console = Console()

ENV_FILENAME = "env.js"
SCRIPT_TAG = f'<script src="/{ENV_FILENAME}"></script>'
SCRIPT_MARKER = f'src="/{ENV_FILENAME}"'
HEAD_END = re.compile(r"</head>", re.IGNORECASE)

PLACEHOLDERS = {
    "URL": "%NEXT_PUBLIC_SUPABASE_URL%",
    "ANON_KEY": "%NEXT_PUBLIC_SUPABASE_ANON_KEY%",
}

# Names that must never reach a public file
FORBIDDEN_NAMES = ("SUPABASE_SERVICE_ROLE_KEY", "service_role")

REDIRECTS = (
    "# Redirects for client-side routing\n"
    "/api/*  /not-found.html  404\n"
    "/*      /index.html      200\n"
)


class InjectionError(Exception):
    """Raised when the export cannot be prepared safely."""


def render_env_js(url: str, anon_key: str, storage_key: str) -> str:
    """Render env.js from public configuration values."""
    env = {
        "NEXT_PUBLIC_SUPABASE_URL": url,
        "NEXT_PUBLIC_SUPABASE_ANON_KEY": anon_key,
    }
    return (
        "// Generated by inject_env.py. Public values only.\n"
        "(function() {\n"
        f"  window.ENV = {json.dumps(env, indent=2)};\n"
        "  window.process = window.process || { env: {} };\n"
        "  Object.assign(window.process.env, window.ENV);\n"
        f"  window.__SUPABASE_STORAGE_KEY = {json.dumps(storage_key)};\n"
        "})();\n"
    )


def substitute_placeholders(template: str, url: str, anon_key: str) -> str:
    """Fill %NEXT_PUBLIC_...% placeholders of an env.js template."""
    if any(name in template for name in FORBIDDEN_NAMES):
        raise InjectionError("env.js template references the service-role key")
    return (
        template
        .replace(PLACEHOLDERS["URL"], url)
        .replace(PLACEHOLDERS["ANON_KEY"], anon_key)
    )


def inject_script_tag(html: str) -> Optional[str]:
    """
    Insert the env.js script tag before </head>.

    Returns None when the page already loads env.js. Pages without a head
    get the tag before their first script, or at the very top.
    """
    if SCRIPT_MARKER in html:
        return None

    head_end = HEAD_END.search(html)
    if head_end:
        return html[:head_end.start()] + SCRIPT_TAG + html[head_end.start():]

    first_script = html.find("<script")
    if first_script != -1:
        return html[:first_script] + SCRIPT_TAG + html[first_script:]

    return SCRIPT_TAG + html


def build_env_js(public_dir: Path, url: str, anon_key: str, storage_key: str) -> str:
    template_path = public_dir / ENV_FILENAME
    if template_path.exists():
        console.print(f"[blue]Using template:[/blue] {template_path}")
        return substitute_placeholders(template_path.read_text(encoding="utf-8"), url, anon_key)
    return render_env_js(url, anon_key, storage_key)


def patch_html_files(out_dir: Path) -> tuple[list[Path], list[Path]]:
    """Inject the script tag into every HTML file. Returns (patched, skipped)."""
    patched, skipped = [], []
    for html_file in sorted(out_dir.rglob("*.html")):
        updated = inject_script_tag(html_file.read_text(encoding="utf-8"))
        if updated is None:
            skipped.append(html_file)
            continue
        html_file.write_text(updated, encoding="utf-8")
        patched.append(html_file)
    return patched, skipped


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Inject runtime env into a static export")
    parser.add_argument("--out", type=Path, default=Path("out"), help="Export directory")
    parser.add_argument("--public", type=Path, default=Path("public"), help="Directory holding an env.js template")
    args = parser.parse_args(argv)

    if not args.out.is_dir():
        console.print(f"[red]Error:[/red] Output directory does not exist: {args.out}")
        console.print("The static build may have failed.")
        return 1

    settings = get_settings()
    if not settings.supabase_url:
        console.print("[yellow]Warning:[/yellow] SUPABASE_URL is not set")
    if not settings.supabase_anon_key:
        console.print("[yellow]Warning:[/yellow] SUPABASE_ANON_KEY is not set")

    storage_key = f"aicurator_auth_{settings.env_prefix}"
    try:
        env_js = build_env_js(args.public, settings.supabase_url, settings.supabase_anon_key, storage_key)
    except InjectionError as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1

    (args.out / ENV_FILENAME).write_text(env_js, encoding="utf-8")
    patched, skipped = patch_html_files(args.out)
    (args.out / "_redirects").write_text(REDIRECTS, encoding="utf-8")

    table = Table(title="Environment Injection")
    table.add_column("Step", style="cyan")
    table.add_column("Result", style="green")
    table.add_row(ENV_FILENAME, "written")
    table.add_row("HTML files patched", str(len(patched)))
    table.add_row("HTML files already patched", str(len(skipped)))
    table.add_row("_redirects", "written")
    console.print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
