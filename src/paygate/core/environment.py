"""
Gateway environments and the helpers that assemble configuration variables.

The variable helpers are intentionally lightweight: they understand .env
files, allow callers to layer overrides, and ultimately return a plain
mapping that can be fed into :class:`paygate.core.config.GatewayConfig`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, MutableMapping, Optional

__all__ = [
    "Environment",
    "GatewayEnvironment",
    "build_environment",
    "load_env_file",
]


@dataclass(frozen=True)
class Environment:
    """
    A gateway deployment the client can talk to.

    Use one of the predefined instances::

        Environment.Development
        Environment.Sandbox
        Environment.Production
    """

    name: str
    server: str
    port: int
    is_ssl: bool
    ssl_certificate: Optional[str] = None

    @property
    def protocol(self) -> str:
        return "https://" if self.is_ssl else "http://"

    @property
    def server_and_port(self) -> str:
        return f"{self.server}:{self.port}"

    @property
    def base_url(self) -> str:
        return self.protocol + self.server_and_port

    @staticmethod
    def parse(name: str) -> "Environment":
        try:
            return _ENVIRONMENTS[name.strip().lower()]
        except KeyError as exc:
            raise ValueError(f"Unknown gateway environment '{name}'") from exc


Environment.Development = Environment(
    "development",
    "localhost",
    int(os.getenv("PAYGATE_GATEWAY_PORT") or "3000"),
    False,
)
Environment.Sandbox = Environment(
    "sandbox", "api.sandbox.braintreegateway.com", 443, True
)
Environment.Production = Environment(
    "production", "api.braintreegateway.com", 443, True
)

_ENVIRONMENTS = {
    env.name: env
    for env in (Environment.Development, Environment.Sandbox, Environment.Production)
}


def _parse_env_file(path: Path) -> Dict[str, str]:
    values: Dict[str, str] = {}
    try:
        data = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return values

    for raw_line in data.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        values[key.strip()] = value
    return values


def load_env_file(
    path: str = ".env",
    *,
    environ: Optional[MutableMapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Load environment variables from ``path`` into ``environ``.

    Existing keys are preserved. The merged mapping is returned so callers can
    inspect the resulting values.
    """
    target: MutableMapping[str, str] = environ if environ is not None else os.environ
    values = _parse_env_file(Path(path))
    for key, value in values.items():
        target.setdefault(key, value)
    return dict(target)


@dataclass(frozen=True)
class GatewayEnvironment:
    """
    A resolved set of variables used to configure the gateway client.
    """

    variables: Mapping[str, str]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.variables.get(key, default)


def build_environment(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> GatewayEnvironment:
    """
    Assemble a :class:`GatewayEnvironment` from multiple sources.

    ``base`` defaults to :data:`os.environ`. ``env_file`` is optional; set it to
    ``None`` to skip file loading entirely. ``overrides`` always win.
    """
    merged: Dict[str, str] = dict(os.environ if base is None else base)

    if env_file is not None:
        for key, value in _parse_env_file(Path(env_file)).items():
            merged.setdefault(key, value)

    if overrides:
        merged.update(overrides)

    return GatewayEnvironment(variables=merged)
