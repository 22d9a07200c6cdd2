# fedora-postinstall/fedora_postinstall/pipeline.py

import subprocess
from typing import Any, Dict, List

from rich.markup import escape

from fedora_postinstall import console_output as con
from fedora_postinstall.logger_utils import app_logger
from fedora_postinstall.stages import (
    base_packages,
    desktop_tweaks,
    fonts,
    package_batches,
    repositories,
    system_update,
)

# Ordered provisioning stages. Handlers take the loaded configuration.
# Batch handlers tolerate per-item failures; every other handler aborts the run on error.
STAGES: List[Dict[str, Any]] = [
    {"name": "1. System Update", "handler": system_update.update_system},
    {"name": "2. DNF Configuration", "handler": system_update.tune_dnf},
    {"name": "3. RPM Fusion Repositories", "handler": repositories.enable_rpmfusion},
    {"name": "4. Additional Repositories", "handler": repositories.enable_extra_repositories},
    {"name": "5. Flathub", "handler": repositories.enable_flathub},
    {"name": "6. Multimedia Codecs", "handler": base_packages.install_multimedia_codecs},
    {"name": "7. Development Tools", "handler": base_packages.install_development_tools},
    {"name": "8. Required Packages", "handler": package_batches.install_required_packages},
    {"name": "9. Packages from pkg.txt", "handler": package_batches.install_manifest_packages},
    {"name": "10. Flatpak Packages", "handler": package_batches.install_flatpak_packages},
    {"name": "11. Flatpak Packages from fpk.txt", "handler": package_batches.install_manifest_flatpaks},
    {"name": "12. Fonts", "handler": fonts.install_fonts},
    {"name": "12. Font Settings", "handler": fonts.configure_fonts},
    {"name": "13. Automatic Updates", "handler": desktop_tweaks.enable_automatic_updates},
    {"name": "13. DNS", "handler": desktop_tweaks.configure_dns},
    {"name": "13. GNOME Extensions App", "handler": desktop_tweaks.install_extensions_app},
    {"name": "13. Preload Service", "handler": desktop_tweaks.enable_preload},
    {"name": "13. Additional Applications", "handler": desktop_tweaks.install_additional_apps},
    {"name": "14. Performance", "handler": desktop_tweaks.tune_swappiness},
    {"name": "15. Security", "handler": desktop_tweaks.enable_firewall},
    {"name": "16. Final System Update", "handler": system_update.final_update},
]


def run_pipeline(app_config: Dict[str, Any], stages: List[Dict[str, Any]] = None) -> None:
    """
    Runs every stage in order. The first stage that raises ends the process
    with exit status 1; later stages are not attempted.
    """
    stages = STAGES if stages is None else stages
    for stage in stages:
        con.print_step(stage["name"])
        app_logger.info(f"Starting stage '{stage['name']}'.")
        try:
            stage["handler"](app_config)
        except subprocess.CalledProcessError as e:
            app_logger.error(f"Stage '{stage['name']}' failed: {e}")
            con.print_error(f"{stage['name']} failed: command exited with status {e.returncode}.", exit_after=True)
        except FileNotFoundError as e:
            app_logger.error(f"Stage '{stage['name']}' failed: {e}")
            con.print_error(f"{stage['name']} failed: required command or file not found ({escape(str(e.filename))}).", exit_after=True)
        except OSError as e:
            app_logger.error(f"Stage '{stage['name']}' failed: {e}", exc_info=True)
            con.print_error(f"{stage['name']} failed: {escape(str(e))}", exit_after=True)
        app_logger.info(f"Stage '{stage['name']}' finished.")

    con.print_success("Fedora post-install configuration completed successfully!")
