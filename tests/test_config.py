from __future__ import annotations

import base64
from pathlib import Path

import pytest

from paygate import (
    ConfigError,
    Environment,
    GatewayConfig,
    GatewayParameters,
    load_env_file,
    load_gateway_config,
)
from paygate.core.environment import build_environment

REQUIRED = {
    "PAYGATE_MERCHANT_ID": "merchant",
    "PAYGATE_PUBLIC_KEY": "public",
    "PAYGATE_PRIVATE_KEY": "private",
}


def _write_env(tmp_path: Path, content: str) -> Path:
    env_file = tmp_path / ".env"
    env_file.write_text(content, encoding="utf-8")
    return env_file


def test_from_mapping_defaults_to_sandbox():
    config = GatewayConfig.from_mapping(REQUIRED)

    assert config.environment is Environment.Sandbox
    assert config.merchant_id == "merchant"
    assert config.timeout_seconds == 60
    assert config.ssl_certificate is None


def test_from_mapping_reads_every_field():
    config = GatewayConfig.from_mapping(
        dict(
            REQUIRED,
            PAYGATE_ENVIRONMENT=" Production ",
            PAYGATE_TIMEOUT_SECONDS="12.5",
            PAYGATE_SSL_CERTIFICATE="/etc/ssl/gateway.pem",
        )
    )

    assert config.environment is Environment.Production
    assert config.timeout_seconds == 12.5
    assert config.verify() == "/etc/ssl/gateway.pem"


@pytest.mark.parametrize(
    "values, message",
    [
        ({"PAYGATE_PUBLIC_KEY": "p", "PAYGATE_PRIVATE_KEY": "q"}, "PAYGATE_MERCHANT_ID"),
        (dict(REQUIRED, PAYGATE_PRIVATE_KEY="   "), "PAYGATE_PRIVATE_KEY"),
        (dict(REQUIRED, PAYGATE_ENVIRONMENT="staging"), "staging"),
        (dict(REQUIRED, PAYGATE_TIMEOUT_SECONDS="soon"), "number"),
        (dict(REQUIRED, PAYGATE_TIMEOUT_SECONDS="0"), "greater than zero"),
    ],
)
def test_invalid_configuration(values, message):
    with pytest.raises(ConfigError, match=message):
        GatewayConfig.from_mapping(values)


def test_urls_and_paths():
    config = GatewayConfig(Environment.Sandbox, "merchant", "public", "private")

    assert config.base_merchant_path() == "/merchants/merchant"
    assert config.base_merchant_url() == "https://api.sandbox.braintreegateway.com:443/merchants/merchant"


def test_development_environment_is_plain_http():
    assert Environment.Development.protocol == "http://"
    assert Environment.Development.base_url.startswith("http://localhost:")


def test_authorization_header():
    config = GatewayConfig(Environment.Sandbox, "merchant", "public", "private")

    scheme, encoded = config.authorization_header().split(" ")

    assert scheme == "Basic"
    assert base64.b64decode(encoded) == b"public:private"


def test_verify_defaults_to_trust_store():
    config = GatewayConfig(Environment.Production, "merchant", "public", "private")

    assert config.verify() is True


def test_environment_parse_rejects_unknown_names():
    with pytest.raises(ValueError):
        Environment.parse("qa")


def test_env_file_is_read(tmp_path):
    env_file = _write_env(
        tmp_path,
        "# gateway credentials\n"
        "PAYGATE_ENVIRONMENT=development\n"
        "PAYGATE_MERCHANT_ID='quoted_merchant'\n"
        'PAYGATE_PUBLIC_KEY="public"\n'
        "PAYGATE_PRIVATE_KEY=private\n"
        "not a variable\n",
    )

    config = load_gateway_config(env_file=str(env_file), base={})

    assert config.environment is Environment.Development
    assert config.merchant_id == "quoted_merchant"
    assert config.public_key == "public"


def test_precedence_base_over_file_and_overrides_over_all(tmp_path):
    env_file = _write_env(tmp_path, "PAYGATE_MERCHANT_ID=from_file\nPAYGATE_PUBLIC_KEY=file_public\n")

    variables = build_environment(
        env_file=str(env_file),
        base={"PAYGATE_MERCHANT_ID": "from_base"},
        overrides={"PAYGATE_PUBLIC_KEY": "override_public"},
    )

    assert variables.get("PAYGATE_MERCHANT_ID") == "from_base"
    assert variables.get("PAYGATE_PUBLIC_KEY") == "override_public"


def test_missing_env_file_is_ignored(tmp_path):
    config = load_gateway_config(env_file=str(tmp_path / "absent.env"), base=REQUIRED)

    assert config.merchant_id == "merchant"


def test_keyword_arguments_win(tmp_path):
    config = load_gateway_config(
        env_file=None,
        base=REQUIRED,
        overrides={"PAYGATE_MERCHANT_ID": "override"},
        merchant_id="keyword",
        environment=Environment.Development,
        timeout_seconds=5,
    )

    assert config.merchant_id == "keyword"
    assert config.environment is Environment.Development
    assert config.timeout_seconds == 5.0


def test_gateway_parameters():
    parameters = GatewayParameters(environment="production", public_key="pk", timeout_seconds=10)

    assert parameters.as_overrides() == {
        "PAYGATE_ENVIRONMENT": "production",
        "PAYGATE_PUBLIC_KEY": "pk",
        "PAYGATE_TIMEOUT_SECONDS": "10",
    }

    config = load_gateway_config(env_file=None, base=REQUIRED, parameters=parameters)

    assert config.environment is Environment.Production
    assert config.public_key == "pk"


def test_explicit_keywords_override_parameters():
    config = load_gateway_config(
        env_file=None,
        base=REQUIRED,
        parameters=GatewayParameters(merchant_id="from_parameters"),
        merchant_id="from_keyword",
    )

    assert config.merchant_id == "from_keyword"


def test_load_env_file_keeps_existing_values(tmp_path):
    env_file = _write_env(tmp_path, "A=file\nB=file\n")
    environ = {"A": "existing"}

    merged = load_env_file(str(env_file), environ=environ)

    assert environ == {"A": "existing", "B": "file"}
    assert merged == environ
