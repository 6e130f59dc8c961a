#!/usr/bin/env python3
"""
Approve every admin account.

Admins whose profiles.user_status is not "approved" are moved to approved
with an audit note, so they are never locked out by the approval flow.

Usage:
    python setup_admin_approvals.py
    python setup_admin_approvals.py --dry-run

Configuration:
    SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY in your .env file.
"""

import argparse
import sys
from typing import Optional

from rich.console import Console
from rich.table import Table

from modules.admin.repository import AdminRepository
from modules.auth.models import UserProfile
from modules.auth.repository import ProfileRepository
from shared.database import get_supabase_client
from shared.exceptions import ExternalServiceError

console = Console()

AUTO_APPROVAL_NOTE = "Auto-approved for admin role"


def admins_needing_approval(admins: list[UserProfile]) -> list[UserProfile]:
    return [admin for admin in admins if admin.user_status != "approved"]


def ensure_admin_approvals(
    profiles: ProfileRepository,
    admin_repo: AdminRepository,
    dry_run: bool = False,
) -> int:
    """Approve pending admins. Returns the number of failed updates."""
    admins = profiles.list_profiles(role="admin")
    if not admins:
        console.print("[dim]No admin users found.[/dim]")
        return 0

    table = Table(title="Admin Users")
    table.add_column("Email", style="cyan")
    table.add_column("Status")
    for admin in admins:
        status = admin.user_status or "not set"
        style = "green" if status == "approved" else "yellow"
        table.add_row(admin.email or admin.id, f"[{style}]{status}[/{style}]")
    console.print(table)

    pending = admins_needing_approval(admins)
    if not pending:
        console.print("[green]✓[/green] All admin users are already approved")
        return 0

    failures = 0
    for admin in pending:
        label = admin.email or admin.id
        if dry_run:
            console.print(f"[cyan]Would approve:[/cyan] {label}")
            continue
        try:
            admin_repo.update_user_status(admin.id, "approved", admin.id, AUTO_APPROVAL_NOTE)
        except ExternalServiceError as e:
            console.print(f"[red]✗[/red] {label}: {e.message}")
            failures += 1
        else:
            console.print(f"[green]✓[/green] {label} approved")

    return failures


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Approve all admin accounts")
    parser.add_argument("--dry-run", action="store_true", help="Show what would change")
    args = parser.parse_args(argv)

    try:
        db = get_supabase_client()
    except RuntimeError as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1

    failures = ensure_admin_approvals(ProfileRepository(db), AdminRepository(db), args.dry_run)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
