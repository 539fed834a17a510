"""
Configuration for the OCPay HTTP client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .environment import build_environment

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_MS",
    "ConfigError",
    "ClientConfig",
    "load_client_config",
]

DEFAULT_BASE_URL = "https://api.oneclickdz.com"
DEFAULT_TIMEOUT_MS = 30_000

_PARAMETER_TO_ENV_KEY = {
    "access_token": "OCPAY_ACCESS_TOKEN",
    "timeout_ms": "OCPAY_TIMEOUT_MS",
    "base_url": "OCPAY_BASE_URL",
}


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


def _normalize_access_token(raw_token: Optional[str]) -> str:
    if raw_token is None:
        raise ConfigError("OCPAY_ACCESS_TOKEN must be provided")
    token = str(raw_token).strip()
    if not token:
        raise ConfigError("OCPAY_ACCESS_TOKEN must not be empty")
    return token


def _parse_timeout(raw_timeout: Any) -> int:
    message = f"OCPAY_TIMEOUT_MS must be a whole number of milliseconds, got '{raw_timeout}'"
    if isinstance(raw_timeout, bool):
        raise ConfigError(message)
    if isinstance(raw_timeout, float) and not raw_timeout.is_integer():
        raise ConfigError(message)
    try:
        timeout_ms = int(raw_timeout)
    except (TypeError, ValueError) as exc:
        raise ConfigError(message) from exc
    if timeout_ms <= 0:
        raise ConfigError("OCPAY_TIMEOUT_MS must be greater than zero")
    return timeout_ms


@dataclass(frozen=True)
class ClientConfig:
    access_token: str
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    base_url: str = DEFAULT_BASE_URL
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "access_token", _normalize_access_token(self.access_token))
        object.__setattr__(self, "timeout_ms", _parse_timeout(self.timeout_ms))
        object.__setattr__(self, "base_url", (self.base_url or DEFAULT_BASE_URL).rstrip("/"))
        object.__setattr__(self, "headers", dict(self.headers or {}))

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    def __repr__(self) -> str:
        return (
            f"ClientConfig(access_token='***', timeout_ms={self.timeout_ms}, "
            f"base_url={self.base_url!r}, headers={self.headers!r})"
        )

    @classmethod
    def from_mapping(
        cls,
        values: Mapping[str, str],
        *,
        headers: Optional[Mapping[str, str]] = None,
    ) -> "ClientConfig":
        return cls(
            access_token=values.get("OCPAY_ACCESS_TOKEN"),
            timeout_ms=values.get("OCPAY_TIMEOUT_MS", DEFAULT_TIMEOUT_MS),
            base_url=values.get("OCPAY_BASE_URL", DEFAULT_BASE_URL),
            headers=headers or {},
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        access_token: Optional[str] = None,
        timeout_ms: Optional[int | str] = None,
        base_url: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> "ClientConfig":
        explicit = {
            "access_token": access_token,
            "timeout_ms": timeout_ms,
            "base_url": base_url,
        }
        merged_overrides: Dict[str, str] = dict(overrides or {})
        for name, value in explicit.items():
            if value is not None:
                merged_overrides[_PARAMETER_TO_ENV_KEY[name]] = str(value)

        settings = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(settings, headers=headers)


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    access_token: Optional[str] = None,
    timeout_ms: Optional[int | str] = None,
    base_url: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    Settings can come from ``OCPAY_*`` environment variables, a ``.env`` file,
    keyword arguments, or any combination; keyword arguments win.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        access_token=access_token,
        timeout_ms=timeout_ms,
        base_url=base_url,
        headers=headers,
    )
