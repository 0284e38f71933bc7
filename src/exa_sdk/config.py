from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from exa_sdk.errors import ExitCode, InvalidInputError, MissingCredentialError
from exa_sdk.urlutil import is_http_url

DEFAULT_BASE_URL = "https://api.exa.ai"
API_KEY_ENV = "EXA_API_KEY"
API_KEY_HEADER = "x-api-key"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True, slots=True)
class ClientConfig:
    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    proxy: str | None = None

    @classmethod
    def resolve(
        cls,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        proxy: str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> ClientConfig:
        """Build a config from explicit values, falling back to the environment for the key.

        This is the only place the environment is consulted; the returned config is
        self-contained.
        """
        env = os.environ if environ is None else environ
        key = api_key or env.get(API_KEY_ENV)
        if not key:
            raise MissingCredentialError(
                code="missing_credential",
                message=f"API key is required: pass api_key or set {API_KEY_ENV}",
                exit_code=ExitCode.INVALID_USAGE,
                details={"env": API_KEY_ENV},
            )
        resolved_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        if not is_http_url(resolved_url):
            raise InvalidInputError(
                code="invalid_input",
                message=f"base_url must be an absolute http(s) URL: {resolved_url!r}",
                exit_code=ExitCode.INVALID_USAGE,
                details={"field": "base_url"},
            )
        return cls(
            api_key=key,
            base_url=resolved_url,
            timeout=timeout,
            proxy=proxy,
        )

    def auth_headers(self) -> dict[str, str]:
        return {API_KEY_HEADER: self.api_key}
