import pytest

ENV_VARS = (
    'SENTRY_DSN',
    'SENTRY_RELEASE',
    'SENTRY_ENVIRONMENT',
    'http_proxy',
    'https_proxy',
    'all_proxy',
    'HTTP_PROXY',
    'HTTPS_PROXY',
    'ALL_PROXY',
)


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch):
    # neither a DSN nor a proxy from the developer's shell may leak into tests
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
