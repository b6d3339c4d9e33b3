"""Tests for the Typer CLI."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from radixvault.cli.context import get_cli_context
from radixvault.cli.typer_app import app
from radixvault.config.models.settings import Settings
from radixvault.services.context import ResolverContext
from tests.helpers import API, DARK_SOURCE, DARK_URL, LIGHT_SOURCE, LIGHT_URL, RAW, FakeFetcher

THEMES_SOURCE = f"{RAW}/themes/main/packages/radix-ui-themes/src/components"
WEBSITE_DOCS = f"{RAW}/website/main/data"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    monkeypatch.delenv("RADIX_LIBRARY", raising=False)
    monkeypatch.delenv("GITHUB_PERSONAL_ACCESS_TOKEN", raising=False)


@pytest.fixture
def cli_fetcher():
    return FakeFetcher()


@pytest.fixture(autouse=True)
def patched_resolution(cli_fetcher):
    """Point every command at default settings and the fake fetcher."""
    settings = Settings()

    def build_context():
        context = ResolverContext.from_settings(settings, fetcher=cli_fetcher)
        token = get_cli_context().github_token
        if token:
            context.fetcher.set_token(token)
        return context

    with (
        patch("radixvault.cli.typer_app.get_config", return_value=settings),
        patch("radixvault.cli.typer_app._build_context", side_effect=build_context),
    ):
        yield


class TestGlobalOptions:
    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "radixvault v0.1.0" in result.output

    def test_token_option_reaches_fetcher(self, runner, cli_fetcher):
        cli_fetcher.responses[f"{API}/themes/contents/packages/radix-ui-themes/src/components"] = [
            {"name": "box.tsx", "type": "file"},
        ]

        result = runner.invoke(app, ["--github-token", "ghp_cli", "list", "themes"])

        assert result.exit_code == 0
        assert cli_fetcher.token == "ghp_cli"


class TestListCommand:
    def test_single_library(self, runner, cli_fetcher):
        # Given
        cli_fetcher.responses[f"{API}/primitives/contents/packages/react"] = [
            {"name": "dialog", "type": "dir"},
        ]

        # When
        result = runner.invoke(app, ["--log-level", "ERROR", "--json", "list", "primitives"])

        # Then
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["success"] is True
        assert payload["data"][0]["components"] == [
            {"name": "dialog", "packageName": "@radix-ui/react-dialog", "type": "unstyled"},
        ]

    def test_all_libraries_fall_back_without_network(self, runner):
        result = runner.invoke(app, ["--log-level", "ERROR", "--json", "list"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert [entry["library"] for entry in payload["data"]] == ["themes", "primitives", "colors"]

    def test_table_output(self, runner, cli_fetcher):
        cli_fetcher.responses[f"{API}/primitives/contents/packages/react"] = [
            {"name": "tabs", "type": "dir"},
        ]

        result = runner.invoke(app, ["list", "primitives"])

        assert result.exit_code == 0
        assert "tabs" in result.output


class TestComponentCommand:
    def test_source_only(self, runner, cli_fetcher):
        cli_fetcher.responses.update(
            {
                f"{THEMES_SOURCE}/button.tsx": "const ButtonSource = 1;",
                f"{WEBSITE_DOCS}/themes/docs/components/button.mdx": "Usage text",
            }
        )

        result = runner.invoke(app, ["component", "themes", "button", "--source-only"])

        assert result.exit_code == 0
        assert "ButtonSource" in result.output
        assert "Usage text" not in result.output

    def test_missing_component_exits_with_error(self, runner):
        result = runner.invoke(app, ["component", "themes", "ghost"])

        assert result.exit_code == 1
        assert "Error: RESOURCE_NOT_FOUND" in result.output

    def test_missing_component_json_error(self, runner):
        result = runner.invoke(app, ["--log-level", "ERROR", "--json", "component", "themes", "ghost"])

        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert payload["success"] is False
        assert payload["errors"][0]["code"] == "RESOURCE_NOT_FOUND"


class TestScaleCommands:
    def test_scale(self, runner, cli_fetcher):
        cli_fetcher.responses.update({LIGHT_URL: LIGHT_SOURCE, DARK_URL: DARK_SOURCE})

        result = runner.invoke(app, ["--log-level", "ERROR", "--json", "scale", "red"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"] == {
            "scaleName": "red",
            "light": {"red": {"red1": "#fffcfc"}},
        }

    def test_scales_fall_back(self, runner):
        result = runner.invoke(app, ["--log-level", "ERROR", "--json", "scales"])

        assert result.exit_code == 0
        assert "blue" in json.loads(result.stdout)["data"]


class TestGettingStartedCommand:
    def test_json(self, runner, cli_fetcher):
        cli_fetcher.responses[f"{WEBSITE_DOCS}/colors/docs/overview/installation.mdx"] = "# Install"

        result = runner.invoke(app, ["--log-level", "ERROR", "--json", "getting-started", "colors"])

        data = json.loads(result.stdout)["data"]
        assert data["title"] == "Radix Colors - Getting Started"
        assert data["content"] == "# Install"


class TestInstallCommand:
    def test_primitive_json(self, runner, cli_fetcher):
        result = runner.invoke(
            app,
            ["--log-level", "ERROR", "--json", "install", "primitives", "-c", "dialog", "-p", "yarn"],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data["packageName"] == "@radix-ui/react-dialog"
        assert data["command"] == "yarn add @radix-ui/react-dialog"
        assert cli_fetcher.calls == []

    def test_unknown_library_is_a_usage_error(self, runner):
        result = runner.invoke(app, ["install", "vue"])

        assert result.exit_code == 2
