"""
Public, high-level helpers for building a configured gateway.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from .core.config import GatewayConfig, GatewayParameters, load_gateway_config
from .core.environment import Environment
from .gateway import PaymentGateway

__all__ = ["create_gateway"]


def create_gateway(
    *,
    config: Optional[GatewayConfig] = None,
    session: Optional[requests.Session] = None,
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
) -> PaymentGateway:
    """
    Construct a :class:`PaymentGateway`.

    Callers can either supply a ready-made :class:`GatewayConfig` or let the
    helper assemble one from environment data.
    """
    if config is not None:
        extras = (
            overrides,
            base,
            parameters,
            environment,
            merchant_id,
            public_key,
            private_key,
            timeout_seconds,
            ssl_certificate,
        )
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built GatewayConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_gateway_config(
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
    return PaymentGateway(cfg, session=session)
