"""Human-readable relative time ("5 minutes ago", "in 2 days")."""

from timewise.relative.relativeapi import time_ago, time_until

__all__ = [
    "time_ago",
    "time_until",
]
