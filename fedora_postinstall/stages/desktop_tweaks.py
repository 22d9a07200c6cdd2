# fedora-postinstall/fedora_postinstall/stages/desktop_tweaks.py

from fedora_postinstall import console_output as con
from fedora_postinstall import system_utils as util
from fedora_postinstall.batch_installer import DnfInstaller, batch_install
from fedora_postinstall.config import (
    SWAPPINESS_LINE,
    SYSCTL_CONF_PATH,
    SYSTEMD_RESOLVED_CONF_PATH,
    UPDATE_SETTINGS,
)
from fedora_postinstall.logger_utils import app_logger


def render_resolved_conf(dns_servers, fallback_dns_servers) -> str:
    """Builds the full contents of /etc/systemd/resolved.conf."""
    lines = [
        "[Resolve]",
        f"DNS={' '.join(dns_servers)}",
        f"FallbackDNS={' '.join(fallback_dns_servers)}",
        "DNSSEC=yes",
        "Cache=yes",
    ]
    return "\n".join(lines) + "\n"


def enable_automatic_updates(app_config):
    con.print_info("Applying additional quality-of-life improvements...")
    for schema, key, value in UPDATE_SETTINGS:
        util.gsettings_set(schema, key, value, logger=app_logger)


def configure_dns(app_config):
    """Replaces resolved.conf and restarts systemd-resolved to pick it up."""
    con.print_info("Configuring better DNS servers...")
    content = render_resolved_conf(app_config["dns_servers"], app_config["fallback_dns_servers"])
    util.write_system_file(SYSTEMD_RESOLVED_CONF_PATH, content, logger=app_logger)
    util.systemctl("restart", "systemd-resolved", logger=app_logger)
    con.print_success("DNS configured")


def install_extensions_app(app_config):
    con.print_info("Installing useful GNOME Shell extensions...")
    util.install_dnf_packages(["gnome-extensions-app"], logger=app_logger)


def enable_preload(app_config):
    util.systemctl("enable", "preload", logger=app_logger)
    util.systemctl("start", "preload", logger=app_logger)


def install_additional_apps(app_config, installer=None):
    con.print_info("Installing additional useful applications...")
    batch_install(app_config["additional_apps"], installer or DnfInstaller())


def tune_swappiness(app_config):
    con.print_info("Applying performance optimizations...")
    util.write_system_file(SYSCTL_CONF_PATH, SWAPPINESS_LINE + "\n", append=True, logger=app_logger)


def enable_firewall(app_config):
    con.print_info("Applying security improvements...")
    util.install_dnf_packages(["firewalld"], logger=app_logger)
    util.systemctl("enable", "firewalld", logger=app_logger)
    util.systemctl("start", "firewalld", logger=app_logger)
    con.print_success("Firewall enabled")
