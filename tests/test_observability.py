import logging

from contribution_image.core.observability import configure_logging
from contribution_image.core.observability import init_sentry
from contribution_image.settings import Settings


def test_init_sentry_skips_when_dsn_missing(monkeypatch) -> None:
    """Sentry initialization is skipped when DSN is absent."""

    calls: list[dict[str, object]] = []

    def fake_init(**kwargs):
        calls.append(kwargs)

    monkeypatch.setattr("contribution_image.core.observability.sentry_sdk.init", fake_init)

    init_sentry(Settings(sentry_dsn=None))

    assert calls == []


def test_init_sentry_initializes_sdk_with_settings(monkeypatch) -> None:
    """Sentry SDK is initialized with configured runtime settings."""

    calls: list[dict[str, object]] = []

    def fake_init(**kwargs):
        calls.append(kwargs)

    monkeypatch.setattr("contribution_image.core.observability.sentry_sdk.init", fake_init)

    settings = Settings(
        sentry_dsn="https://examplePublicKey@o0.ingest.sentry.io/0",
        environment="ci",
        release="1.0.0",
        sentry_traces_sample_rate=0.0,
    )
    init_sentry(settings)

    assert calls == [
        {
            "dsn": "https://examplePublicKey@o0.ingest.sentry.io/0",
            "environment": "ci",
            "release": "1.0.0",
            "traces_sample_rate": 0.0,
            "send_default_pii": False,
        }
    ]


def test_configure_logging_applies_level(monkeypatch) -> None:
    """Logging is configured at the level named in settings."""

    calls: list[dict[str, object]] = []

    def fake_basic_config(**kwargs):
        calls.append(kwargs)

    monkeypatch.setattr(
        "contribution_image.core.observability.logging.basicConfig", fake_basic_config
    )

    configure_logging(Settings(log_level="debug"))

    assert calls[0]["level"] == "DEBUG"
    assert logging.getLevelName(calls[0]["level"]) == logging.DEBUG
