"""Shared utilities."""

from baribhara.shared.utils.datetime import utc_now, utc_now_iso

__all__ = ["utc_now", "utc_now_iso"]
