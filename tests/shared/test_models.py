"""Tests for request and result models."""

import pytest
from pydantic import ValidationError

from radixvault.shared.constants import ComponentType, Library, PackageManager
from radixvault.shared.errors import DomainError
from radixvault.shared.models import (
    ComponentInfo,
    GetComponentResult,
    InstallationRequest,
    validate_name,
)


class TestValidateName:
    def test_strips_whitespace(self):
        assert validate_name("  dialog\n") == "dialog"

    def test_accepts_max_length(self):
        assert validate_name("a" * 100) == "a" * 100

    @pytest.mark.parametrize("name", ["", "  ", "a" * 101])
    def test_rejects_invalid(self, name):
        with pytest.raises(DomainError) as exc_info:
            validate_name(name, field="scale")

        assert exc_info.value.message.startswith("Invalid scale:")
        assert isinstance(exc_info.value.original_error, ValidationError)


class TestInstallationRequest:
    def test_defaults(self):
        request = InstallationRequest(library="themes")

        assert request.library is Library.THEMES
        assert request.package_manager is PackageManager.NPM
        assert request.component is None

    def test_rejects_unknown_manager(self):
        with pytest.raises(ValidationError):
            InstallationRequest(library="themes", package_manager="bun")


class TestResultModels:
    def test_component_info_alias(self):
        info = ComponentInfo(name="dialog", package_name="@radix-ui/react-dialog", type="unstyled")

        assert info.model_dump(by_alias=True, mode="json") == {
            "name": "dialog",
            "packageName": "@radix-ui/react-dialog",
            "type": "unstyled",
        }

    def test_get_component_result_alias(self):
        result = GetComponentResult(
            library=Library.THEMES,
            component_name="button",
            package_name="@radix-ui/themes",
            type=ComponentType.STYLED,
            source="src",
            usage="usage",
        )

        data = result.model_dump(by_alias=True, mode="json")

        assert data["componentName"] == "button"
        assert data["library"] == "themes"
