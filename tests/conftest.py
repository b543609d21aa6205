"""
Shared fixtures.

Every test runs with a clean DEYE_* environment and a config file
location inside its own temporary directory.
"""

import logging
import os
from unittest.mock import Mock, patch

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Remove DEYE_* variables and point the config file into tmp_path."""
    for name in list(os.environ):
        if name.startswith("DEYE_"):
            monkeypatch.delenv(name, raising=False)
    for name in ("FORCE_COLOR", "NO_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE", "XDG_CONFIG_HOME"):
        monkeypatch.delenv(name, raising=False)
    config_path = tmp_path / "deyecli" / "config"
    monkeypatch.setenv("DEYE_CONFIG", str(config_path))
    yield config_path

    # Drop handlers installed by setup_logging; they hold this test's streams.
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def config_path(isolated_environment):
    return isolated_environment


@pytest.fixture
def http_session():
    """Replace the requests session used by the HTTP client."""
    with patch("deyecli.infrastructure.http.client.requests.Session") as session_cls:
        session = session_cls.return_value
        session.post.return_value = Mock(status_code=200, text='{"code": "1000000", "success": true}')
        yield session


def posted_json(session):
    """JSON body of the last POST made through the mocked session."""
    return session.post.call_args.kwargs["json"]


def posted_url(session):
    return session.post.call_args.args[0]


def posted_headers(session):
    return session.post.call_args.kwargs["headers"]
