"""Request and result models.

Pydantic models validating operation input and shaping the replies handed
to callers (CLI or any protocol adapter).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from radixvault.shared.constants import ComponentType, Library, PackageManager
from radixvault.shared.errors import create_validation_error

NAME_MAX_LENGTH = 100


class ComponentRequest(BaseModel):
    """A request naming one component or scale."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)


class InstallationRequest(BaseModel):
    """Parameters of an installation guide request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    library: Library
    component: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    package_manager: PackageManager = PackageManager.NPM


def validate_name(name: str, field: str = "name") -> str:
    """Validate a component or scale name.

    Args:
        name: Raw name from the caller
        field: Field name reported in the error

    Returns:
        The stripped name

    Raises:
        DomainError: If the name is empty or longer than 100 characters
    """
    try:
        return ComponentRequest(name=name).name
    except ValidationError as e:
        details = ", ".join(err["msg"] for err in e.errors())
        raise create_validation_error(
            f"Invalid {field}: {details}",
            field=field,
            operation="validate_name",
            original_error=e,
        ) from e


class ComponentInfo(BaseModel):
    """One entry of a component listing."""

    name: str
    package_name: str = Field(serialization_alias="packageName")
    type: ComponentType


class ListComponentsResult(BaseModel):
    """Reply of the list operation."""

    library: Library
    total: int
    components: list[ComponentInfo]
    note: str = ""


class GetComponentResult(BaseModel):
    """Reply of the component operation."""

    library: Library
    component_name: str = Field(serialization_alias="componentName")
    package_name: str = Field(serialization_alias="packageName")
    type: ComponentType
    source: str
    usage: str


class GettingStartedResult(BaseModel):
    """Reply of the getting-started operation."""

    library: Library
    title: str
    description: str
    source: str
    content: str
    note: str
