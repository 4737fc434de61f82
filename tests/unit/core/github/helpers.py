"""Shared repository builders for the GitHub tests."""

from datetime import datetime, timedelta, timezone

from core.github.models import Repository

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_repo(name='repo', age_days=400, updated_days_ago=3, **fields):
    fields.setdefault('size', 2048)
    return Repository(
        name=name,
        created_at=NOW - timedelta(days=age_days),
        updated_at=NOW - timedelta(days=updated_days_ago),
        html_url=f"https://github.com/octo/{name}",
        **fields
    )
