"""Installation guides.

Guides are generated locally; nothing here touches the network.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from radixvault.shared.constants import Library, Package, PackageManager
from radixvault.shared.models import InstallationRequest

logger = logging.getLogger(__name__)

_INSTALL_VERBS = {
    PackageManager.NPM: "npm install",
    PackageManager.YARN: "yarn add",
    PackageManager.PNPM: "pnpm add",
}


class InstallationGuide(BaseModel):
    """Installation instructions for one library or primitive."""

    library: Library
    package_name: str = Field(serialization_alias="packageName")
    package_manager: PackageManager = Field(serialization_alias="packageManager")
    command: str
    commands: dict[str, str]
    setup: str


def install_command(package_name: str, package_manager: PackageManager) -> str:
    """``npm install x``, ``yarn add x`` or ``pnpm add x``."""
    return f"{_INSTALL_VERBS[package_manager]} {package_name}"


def _component_namespace(component: str) -> str:
    return "".join(part.capitalize() for part in component.split("-"))


def _themes_setup(command: str) -> str:
    return f"""# Step 1: Install Radix Themes
{command}

# Step 2: Import the CSS file in your root component
import '{Package.THEMES}/styles.css';

# Step 3: Wrap your application with the Theme component
import {{ Theme }} from '{Package.THEMES}';

function App() {{
  return (
    <Theme>
      <YourAppContent />
    </Theme>
  );
}}

# Step 4: Start using components
import {{ Button, Flex, Text }} from '{Package.THEMES}';"""


def _primitive_setup(command: str, component: str, package_name: str) -> str:
    namespace = _component_namespace(component)
    return f"""# Step 1: Install the {component} primitive
{command}

# Step 2: Import with namespace
import * as {namespace} from '{package_name}';

# Step 3: Use the compound components
<{namespace}.Root>
  <{namespace}.Trigger>Open {component}</{namespace}.Trigger>
  <{namespace}.Content>Content goes here</{namespace}.Content>
</{namespace}.Root>

# Step 4: Add your own styling (CSS, CSS Modules, Tailwind, ...)"""


def _primitives_overview_setup(package_manager: PackageManager) -> str:
    dialog = install_command(f"{Package.PRIMITIVES_PREFIX}dialog", package_manager)
    return f"""# Install individual primitives (recommended)
{dialog}

# Import with namespace
import * as Dialog from '{Package.PRIMITIVES_PREFIX}dialog';

# Use compound components and apply your own styling
<Dialog.Root>
  <Dialog.Trigger />
  <Dialog.Portal>
    <Dialog.Overlay />
    <Dialog.Content />
  </Dialog.Portal>
</Dialog.Root>"""


def _colors_setup(command: str) -> str:
    return f"""# Step 1: Install Radix Colors
{command}

# Step 2: Import color scales
import {{ blue, red, green }} from '{Package.COLORS}';

# Step 3: Use in CSS-in-JS
const styles = {{
  backgroundColor: blue.blue3,
  color: blue.blue11,
}};

# Or import the CSS custom properties
import '{Package.COLORS}/blue.css';
import '{Package.COLORS}/blue-dark.css';"""


def installation_guide(
    library: Library | str,
    component: str | None = None,
    package_manager: PackageManager | str = PackageManager.NPM,
) -> InstallationGuide:
    """Build the installation guide for a library.

    Args:
        library: Library to install
        component: Primitive to install (primitives only, ignored otherwise)
        package_manager: npm, yarn or pnpm

    Raises:
        pydantic.ValidationError: If any argument is invalid
    """
    request = InstallationRequest(
        library=library,
        component=component,
        package_manager=package_manager,
    )
    manager = request.package_manager

    if request.library is Library.THEMES:
        package_name = Package.THEMES
    elif request.library is Library.COLORS:
        package_name = Package.COLORS
    elif request.component:
        package_name = f"{Package.PRIMITIVES_PREFIX}{request.component.lower()}"
    else:
        package_name = f"{Package.PRIMITIVES_PREFIX}dialog"

    command = install_command(package_name, manager)
    commands = {pm.value: install_command(package_name, pm) for pm in PackageManager}

    if request.library is Library.THEMES:
        setup = _themes_setup(command)
    elif request.library is Library.COLORS:
        setup = _colors_setup(command)
    elif request.component:
        setup = _primitive_setup(command, request.component.lower(), package_name)
    else:
        setup = _primitives_overview_setup(manager)

    logger.debug(
        "Generated installation guide for %s (%s)",
        package_name,
        manager.value,
    )
    return InstallationGuide(
        library=request.library,
        package_name=package_name,
        package_manager=manager,
        command=command,
        commands=commands,
        setup=setup,
    )


__all__ = ["InstallationGuide", "install_command", "installation_guide"]
