# fedora-postinstall/fedora_postinstall/batch_installer.py

import enum
import subprocess
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple, Union

from rich.markup import escape

from fedora_postinstall import console_output as con
from fedora_postinstall import system_utils
from fedora_postinstall.config import FLATHUB_REMOTE_NAME
from fedora_postinstall.logger_utils import app_logger
from fedora_postinstall.manifest import read_manifest

# install(identifier) -> True when the package manager reported success.
Installer = Callable[[str], bool]


class InstallOutcome(enum.Enum):
    INSTALLED = "installed"
    FAILED = "failed"


class CommandInstaller:
    """Installs one identifier per invocation of an external package manager."""

    def __init__(self, base_command: List[str]):
        self.base_command = list(base_command)

    def command_for(self, identifier: str) -> List[str]:
        return self.base_command + [identifier]

    def __call__(self, identifier: str) -> bool:
        try:
            system_utils.run_command(self.command_for(identifier), check=True, logger=app_logger)
        except subprocess.CalledProcessError as e:
            app_logger.warning(f"Install of '{identifier}' exited with status {e.returncode}.")
            return False
        except FileNotFoundError:
            app_logger.warning(f"Install of '{identifier}' failed: '{self.base_command[0]}' is not available.")
            return False
        return True


class DnfInstaller(CommandInstaller):
    def __init__(self, extra_args: Optional[List[str]] = None):
        super().__init__(["sudo", "dnf", "install", "-y"] + list(extra_args or []))


class FlatpakInstaller(CommandInstaller):
    def __init__(self, remote: str = FLATHUB_REMOTE_NAME):
        super().__init__(["flatpak", "install", "-y", remote])


def batch_install(
    identifiers: Iterable[str],
    installer: Installer,
    label: str = ""
) -> List[Tuple[str, InstallOutcome]]:
    """
    Calls installer once per identifier, strictly in order.

    A failing item (False result or any exception) is reported as a warning and
    never stops the batch. label is prepended to the identifier in status
    lines, e.g. "Flatpak: ".
    """
    outcomes = []
    for identifier in identifiers:
        try:
            succeeded = bool(installer(identifier))
        except Exception as e:
            app_logger.error(f"Unexpected error installing '{identifier}': {e}", exc_info=True)
            succeeded = False

        if succeeded:
            con.print_success(f"Installed {escape(label + identifier)}")
            app_logger.info(f"Installed {label}{identifier}")
            outcomes.append((identifier, InstallOutcome.INSTALLED))
        else:
            con.print_warning(f"Failed to install {escape(label + identifier)}, skipping...")
            app_logger.warning(f"Failed to install {label}{identifier}")
            outcomes.append((identifier, InstallOutcome.FAILED))
    return outcomes


def batch_install_from_manifest(
    manifest_path: Union[str, Path],
    installer: Installer,
    label: str = "",
    kind: str = "packages"
) -> List[Tuple[str, InstallOutcome]]:
    """Runs batch_install over a manifest file; a missing or unreadable file only skips the batch."""
    manifest_path = Path(manifest_path)
    name = escape(manifest_path.name)
    if not manifest_path.is_file():
        con.print_warning(f"{name} not found, skipping {kind} installation from file")
        app_logger.warning(f"Manifest '{manifest_path}' is missing or not a regular file, batch skipped.")
        return []

    try:
        identifiers = read_manifest(manifest_path)
    except OSError as e:
        con.print_warning(f"{name} could not be read, skipping {kind} installation from file")
        app_logger.warning(f"Manifest '{manifest_path}' could not be read: {e}")
        return []

    con.print_info(f"Installing {kind} from {name}...")
    app_logger.info(f"Read {len(identifiers)} identifiers from '{manifest_path}'.")
    outcomes = batch_install(identifiers, installer, label=label)
    con.print_success(f"Finished installing {kind} from {name}")
    return outcomes
