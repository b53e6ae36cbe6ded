from __future__ import annotations

"""
Best-effort Sentry setup for the ladder command-line tools.

Environment variables (all optional):
- SENTRY_DSN / LADDER_SENTRY_DSN: DSN that enables reporting; first non-empty wins.
- SENTRY_ENV / ENV: environment name, "development" when unset.
- SENTRY_TRACES_SAMPLE_RATE: tracing sample rate, clamped into [0, 1].
- SENTRY_DEBUG: 1/true/yes/on turns on SDK debug output.

Only entry points call ``init_sentry``; the engine modules never report on
their own. ERROR records logged under ``ladder`` become Sentry events.
"""

import logging
import os
from typing import Any, Iterable, Optional
from urllib.parse import urlparse

_LOG = logging.getLogger("ladder.core.sentry")

DEFAULT_DSN_ENVS = ("SENTRY_DSN", "LADDER_SENTRY_DSN")
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _parse_float_env(name: str, default: float) -> float:
    """Read a rate from the environment, clamped into [0.0, 1.0].

    Unset, empty or unparsable values give ``default``.
    """
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        _LOG.debug("Ignoring %s=%r; using default=%s", name, raw, default)
        return default
    return min(1.0, max(0.0, value))


def _resolve_dsn(env_names: Iterable[str]) -> Optional[str]:
    """First non-empty DSN among ``env_names`` with stray quotes removed."""
    raw = next((os.environ[n] for n in env_names if os.getenv(n)), None)
    if raw is None:
        return None
    return raw.strip().strip("\"'")


def _is_valid_dsn(dsn: str) -> bool:
    parsed = urlparse(dsn)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def _sentry_options(dsn: str, release: Optional[str]) -> dict[str, Any]:
    return {
        "dsn": dsn,
        "environment": os.getenv("SENTRY_ENV") or os.getenv("ENV") or "development",
        "release": release,
        "traces_sample_rate": _parse_float_env("SENTRY_TRACES_SAMPLE_RATE", 0.0),
        "debug": os.getenv("SENTRY_DEBUG", "").lower() in _TRUTHY,
    }


def init_sentry(
    *,
    context: str,
    release: Optional[str] = None,
    dsn_envs: Optional[Iterable[str]] = None,
) -> bool:
    """Initialize Sentry and report whether it is active.

    Never raises: a missing or malformed DSN, or an SDK failure, leaves
    reporting disabled and logs the reason at INFO.
    """
    env_names = tuple(dsn_envs) if dsn_envs is not None else DEFAULT_DSN_ENVS
    dsn = _resolve_dsn(env_names)
    if not dsn:
        _LOG.info("Sentry disabled: no DSN in %s", ", ".join(env_names))
        return False
    if not _is_valid_dsn(dsn):
        _LOG.info("Sentry disabled: DSN is not an http(s) URL with a host")
        return False

    import sentry_sdk
    from sentry_sdk.integrations.logging import LoggingIntegration

    options = _sentry_options(dsn, release)
    try:
        sentry_sdk.init(
            integrations=[
                LoggingIntegration(level=logging.INFO, event_level=logging.ERROR)
            ],
            **options,
        )
        sentry_sdk.set_tag("service", context)
    except Exception as exc:  # pragma: no cover - SDK-internal failures
        _LOG.info("Sentry init failed: %s", exc)
        return False

    _LOG.info(
        "Sentry initialized: context=%s env=%s traces=%s",
        context,
        options["environment"],
        options["traces_sample_rate"],
    )
    return True


__all__ = ["DEFAULT_DSN_ENVS", "init_sentry", "_parse_float_env"]
