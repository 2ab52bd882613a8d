"""Tests for configuration and profile helpers."""

from __future__ import annotations

import hashlib
import mimetypes
from pathlib import Path

import pytest

from portfolio_site.config import (
    DEFAULT_PORT,
    DEFAULT_STATIC_DIR,
    MIME_TYPES,
    get_host,
    get_log_level,
    get_static_dir,
    register_mime_types,
)
from portfolio_site.services.profile import gravatar_url, home_context


class TestConfig:
    def test_port_is_fixed(self) -> None:
        assert DEFAULT_PORT == 8080

    def test_static_dir_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PORTFOLIO_STATIC_DIR", raising=False)
        assert get_static_dir() == DEFAULT_STATIC_DIR
        assert (DEFAULT_STATIC_DIR / "images" / "favicon.ico").is_file()

    def test_static_dir_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("PORTFOLIO_STATIC_DIR", str(tmp_path))
        assert get_static_dir() == tmp_path

    def test_host_and_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORTFOLIO_HOST", "127.0.0.1")
        monkeypatch.setenv("PORTFOLIO_LOG_LEVEL", "DEBUG")
        assert get_host() == "127.0.0.1"
        assert get_log_level() == "debug"

    def test_defaults_without_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PORTFOLIO_HOST", raising=False)
        monkeypatch.delenv("PORTFOLIO_LOG_LEVEL", raising=False)
        assert get_host() == "0.0.0.0"
        assert get_log_level() == "info"

    @pytest.mark.parametrize("extension", sorted(MIME_TYPES))
    def test_registered_mime_types(self, extension: str) -> None:
        register_mime_types()
        guessed, _ = mimetypes.guess_type(f"asset{extension}")
        assert guessed == MIME_TYPES[extension]


class TestProfile:
    def test_gravatar_normalizes_email(self) -> None:
        digest = hashlib.md5(b"someone@example.com").hexdigest()
        assert gravatar_url("  SomeOne@Example.com ", 80) == (
            f"https://www.gravatar.com/avatar/{digest}?s=80"
        )

    def test_home_context_keys(self) -> None:
        context = home_context()
        assert set(context) == {"name", "role", "avatar_url", "description"}
        assert context["avatar_url"].endswith("?s=275")
