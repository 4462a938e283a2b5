"""End-to-end tests for application startup from configuration."""

import json

import pytest
from fastapi.testclient import TestClient

from bunko.domain.error import ConfigurationError
from bunko.interface.api.app import create_app
from bunko.util.di.container import setup_di
from tests.di import build_test_container


class TestStartup:
    """The taxonomy is read from the environment when none is passed in."""

    def test_builds_registry_from_environment(self, monkeypatch):
        # Arrange
        monkeypatch.setenv(
            "CONTENT__POST_TYPES", json.dumps([{"name": "blog"}, {"name": "news"}])
        )
        monkeypatch.setenv(
            "CONTENT__COLLECTIONS",
            json.dumps([{"name": "everything", "post_types": ["blog", "news"]}]),
        )

        # Act
        app_instance = create_app()
        setup_di(app_instance, build_test_container())
        response = TestClient(app_instance).get("/health")

        # Assert
        assert response.json()["post_types"] == ["blog", "news"]
        assert response.json()["collections"] == ["everything"]

    def test_misconfiguration_aborts_startup(self, monkeypatch):
        monkeypatch.setenv("CONTENT__POST_TYPES", json.dumps([{"name": "blog"}]))
        monkeypatch.setenv(
            "CONTENT__COLLECTIONS",
            json.dumps([{"name": "articles", "post_types": ["blog", "missing"]}]),
        )

        with pytest.raises(ConfigurationError, match="missing"):
            create_app()

    def test_reserved_path_aborts_startup(self, monkeypatch):
        monkeypatch.setenv(
            "CONTENT__POST_TYPES", json.dumps([{"name": "blog", "path": "posts"}])
        )

        with pytest.raises(ConfigurationError, match="reserved"):
            create_app()
