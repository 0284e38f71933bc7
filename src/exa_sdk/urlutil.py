from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import ParseResult, urlparse, urlunparse


def normalize_host(host: str) -> str:
    return host.strip().strip(".").lower()


def normalize_domain_entry(value: str) -> str | None:
    candidate = value.strip()
    if not candidate:
        return None
    if "://" not in candidate:
        candidate = f"//{candidate}"
    host = urlparse(candidate).hostname
    if not host:
        return None
    return normalize_host(host)


def normalize_domains(values: Iterable[str]) -> list[str]:
    domains: list[str] = []
    seen: set[str] = set()
    for entry in values:
        normalized_domain = normalize_domain_entry(str(entry))
        if not normalized_domain or normalized_domain in seen:
            continue
        seen.add(normalized_domain)
        domains.append(normalized_domain)
    return domains


def is_http_url(value: str) -> bool:
    if not value or value != value.strip() or any(ch.isspace() for ch in value):
        return False
    try:
        parsed = urlparse(value)
        # .port raises on a malformed port
        has_host = bool(parsed.hostname) and parsed.port != 0
    except ValueError:
        return False
    return parsed.scheme in {"http", "https"} and has_host


def redact_url(url: str) -> str:
    parsed = urlparse(url)
    hostname = parsed.hostname or ""
    netloc = hostname
    if parsed.port:
        netloc = f"{hostname}:{parsed.port}"
    if not netloc:
        netloc = parsed.netloc
    redacted = ParseResult(
        scheme=parsed.scheme,
        netloc=netloc,
        path=parsed.path,
        params=parsed.params,
        query="",
        fragment="",
    )
    return urlunparse(redacted)
