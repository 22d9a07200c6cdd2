# fedora-postinstall/fedora_postinstall/stages/base_packages.py

from fedora_postinstall import console_output as con
from fedora_postinstall import system_utils as util
from fedora_postinstall.config import DEV_TOOLS_GROUP, MULTIMEDIA_EXCLUDES
from fedora_postinstall.logger_utils import app_logger


def install_multimedia_codecs(app_config):
    """Installs codecs as one dnf transaction, then refreshes the @core group."""
    con.print_info("Installing multimedia codecs and essential packages...")
    excludes = [f"--exclude={name}" for name in MULTIMEDIA_EXCLUDES]
    util.install_dnf_packages(app_config["multimedia_packages"], extra_args=excludes, logger=app_logger)
    util.run_command(["sudo", "dnf", "update", "-y", "@core"], logger=app_logger)
    con.print_success("Multimedia codecs installed")


def install_development_tools(app_config):
    con.print_info("Installing development tools...")
    util.run_command(["sudo", "dnf", "groupinstall", "-y", DEV_TOOLS_GROUP], logger=app_logger)
    util.install_dnf_packages(app_config["dev_tools"], logger=app_logger)
    con.print_success("Development tools installed")
