# fedora-postinstall/fedora_postinstall/stages/repositories.py

from fedora_postinstall import console_output as con
from fedora_postinstall import system_utils as util
from fedora_postinstall.config import (
    EXTRA_REPOSITORIES,
    FLATHUB_REMOTE_NAME,
    FLATHUB_REPO_URL,
    RPMFUSION_RELEASE_URLS,
)
from fedora_postinstall.logger_utils import app_logger


def enable_rpmfusion(app_config):
    """Installs the RPM Fusion free and nonfree release packages for this Fedora release."""
    con.print_info("Enabling RPM Fusion repositories...")
    release = util.get_fedora_release(logger=app_logger)
    urls = [url.format(release=release) for url in RPMFUSION_RELEASE_URLS]
    util.install_dnf_packages(urls, logger=app_logger)
    con.print_success("RPM Fusion repositories enabled")


def enable_extra_repositories(app_config):
    con.print_info("Enabling additional repositories...")
    for repo_id in EXTRA_REPOSITORIES:
        util.run_command(["sudo", "dnf", "config-manager", "--set-enabled", repo_id], logger=app_logger)
    con.print_success("Additional repositories enabled")


def enable_flathub(app_config):
    con.print_info("Enabling Flathub repository...")
    util.run_command(
        ["flatpak", "remote-add", "--if-not-exists", FLATHUB_REMOTE_NAME, FLATHUB_REPO_URL],
        logger=app_logger
    )
    con.print_success("Flathub repository enabled")
