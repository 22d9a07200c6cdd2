# fedora-postinstall/fedora_postinstall/stages/package_batches.py

from pathlib import Path

from fedora_postinstall import console_output as con
from fedora_postinstall.batch_installer import (
    DnfInstaller,
    FlatpakInstaller,
    batch_install,
    batch_install_from_manifest,
)
from fedora_postinstall.config import FLATPAK_MANIFEST_NAME, PKG_MANIFEST_NAME

FLATPAK_LABEL = "Flatpak: "


def install_required_packages(app_config, installer=None):
    con.print_info("Installing required packages...")
    batch_install(app_config["required_packages"], installer or DnfInstaller())


def install_manifest_packages(app_config, installer=None, manifest_dir=None):
    """Installs native packages listed in pkg.txt, if the file exists."""
    manifest_path = Path(manifest_dir or Path.cwd()) / PKG_MANIFEST_NAME
    batch_install_from_manifest(manifest_path, installer or DnfInstaller(), kind="packages")


def install_flatpak_packages(app_config, installer=None):
    con.print_info("Installing required Flatpak packages...")
    batch_install(app_config["flatpak_packages"], installer or FlatpakInstaller(), label=FLATPAK_LABEL)


def install_manifest_flatpaks(app_config, installer=None, manifest_dir=None):
    """Installs Flatpak applications listed in fpk.txt, if the file exists."""
    manifest_path = Path(manifest_dir or Path.cwd()) / FLATPAK_MANIFEST_NAME
    batch_install_from_manifest(
        manifest_path,
        installer or FlatpakInstaller(),
        label=FLATPAK_LABEL,
        kind="Flatpak packages"
    )
