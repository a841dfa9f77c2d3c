"""
Configuration objects and helpers for the gateway client.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .environment import Environment, build_environment

__all__ = [
    "API_VERSION",
    "ConfigError",
    "GatewayConfig",
    "GatewayParameters",
    "load_gateway_config",
]

API_VERSION = "4"

_PARAMETER_TO_ENV_KEY = {
    "environment": "PAYGATE_ENVIRONMENT",
    "merchant_id": "PAYGATE_MERCHANT_ID",
    "public_key": "PAYGATE_PUBLIC_KEY",
    "private_key": "PAYGATE_PRIVATE_KEY",
    "timeout_seconds": "PAYGATE_TIMEOUT_SECONDS",
    "ssl_certificate": "PAYGATE_SSL_CERTIFICATE",
}


def _stringify(value: Any) -> str:
    if isinstance(value, Environment):
        return value.name
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class GatewayParameters:
    """
    Explicit parameter bundle for constructing :class:`GatewayConfig`.

    Callers can either instantiate this helper or pass the individual keyword
    arguments directly to :func:`load_gateway_config`.
    """

    environment: Optional[Environment | str] = None
    merchant_id: Optional[str] = None
    public_key: Optional[str] = None
    private_key: Optional[str] = None
    timeout_seconds: Optional[int | float | str] = None
    ssl_certificate: Optional[str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = _stringify(value)
        return overrides


def _collect_parameter_overrides(
    parameters: Optional[GatewayParameters],
    explicit: Mapping[str, Any],
) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if parameters is not None:
        overrides.update(parameters.as_overrides())

    for key, value in explicit.items():
        if value is None:
            continue
        try:
            env_key = _PARAMETER_TO_ENV_KEY[key]
        except KeyError as exc:
            raise TypeError(f"Unknown gateway parameter '{key}'") from exc
        overrides[env_key] = _stringify(value)
    return overrides


class ConfigError(Exception):
    """Raised when the supplied configuration is invalid."""


def _require(values: Mapping[str, str], key: str) -> str:
    raw = values.get(key)
    if raw is None:
        raise ConfigError(f"{key} must be provided")
    value = raw.strip()
    if not value:
        raise ConfigError(f"{key} must not be empty")
    return value


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigError(
            f"PAYGATE_TIMEOUT_SECONDS must be a number, got '{raw}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("PAYGATE_TIMEOUT_SECONDS must be greater than zero")
    return timeout


@dataclass(frozen=True)
class GatewayConfig:
    environment: Environment
    merchant_id: str
    public_key: str
    private_key: str
    timeout_seconds: float = 60
    ssl_certificate: Optional[str] = None

    def base_merchant_path(self) -> str:
        return "/merchants/" + self.merchant_id

    def base_merchant_url(self) -> str:
        return self.environment.base_url + self.base_merchant_path()

    def authorization_header(self) -> str:
        credentials = f"{self.public_key}:{self.private_key}".encode("utf-8")
        return "Basic " + base64.b64encode(credentials).decode("ascii")

    def verify(self) -> str | bool:
        """
        Value for the ``verify`` argument of :mod:`requests`: the pinned CA file
        when one is configured, otherwise the default trust store.
        """
        return self.ssl_certificate or self.environment.ssl_certificate or True

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "GatewayConfig":
        environment_name = values.get("PAYGATE_ENVIRONMENT", "sandbox")
        try:
            environment = Environment.parse(environment_name)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

        merchant_id = _require(values, "PAYGATE_MERCHANT_ID")
        public_key = _require(values, "PAYGATE_PUBLIC_KEY")
        private_key = _require(values, "PAYGATE_PRIVATE_KEY")
        timeout_seconds = _parse_timeout(values.get("PAYGATE_TIMEOUT_SECONDS", "60"))
        ssl_certificate = values.get("PAYGATE_SSL_CERTIFICATE") or None

        return cls(
            environment=environment,
            merchant_id=merchant_id,
            public_key=public_key,
            private_key=private_key,
            timeout_seconds=timeout_seconds,
            ssl_certificate=ssl_certificate,
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        parameters: Optional[GatewayParameters] = None,
        environment: Optional[Environment | str] = None,
        merchant_id: Optional[str] = None,
        public_key: Optional[str] = None,
        private_key: Optional[str] = None,
        timeout_seconds: Optional[int | float | str] = None,
        ssl_certificate: Optional[str] = None,
    ) -> "GatewayConfig":
        parameter_overrides = _collect_parameter_overrides(
            parameters,
            {
                "environment": environment,
                "merchant_id": merchant_id,
                "public_key": public_key,
                "private_key": private_key,
                "timeout_seconds": timeout_seconds,
                "ssl_certificate": ssl_certificate,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        variables = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(variables.variables)


def load_gateway_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[GatewayParameters] = None,
    environment: Optional[Environment | str] = None,
    merchant_id: Optional[str] = None,
    public_key: Optional[str] = None,
    private_key: Optional[str] = None,
    timeout_seconds: Optional[int | float | str] = None,
    ssl_certificate: Optional[str] = None,
) -> GatewayConfig:
    """
    Convenience wrapper that mirrors :meth:`GatewayConfig.from_env`.

    The configuration can be provided entirely through environment variables,
    a ``.env`` file, direct keyword arguments, or any combination of the three.
    """
    return GatewayConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        environment=environment,
        merchant_id=merchant_id,
        public_key=public_key,
        private_key=private_key,
        timeout_seconds=timeout_seconds,
        ssl_certificate=ssl_certificate,
    )
