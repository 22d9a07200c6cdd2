# fedora-postinstall/fedora_postinstall/stages/system_update.py

from fedora_postinstall import console_output as con
from fedora_postinstall import system_utils as util
from fedora_postinstall.config import DNF_CONF_PATH, DNF_TUNING_LINES
from fedora_postinstall.logger_utils import app_logger


def update_system(app_config):
    """Brings every installed package up to date. Failure aborts the run."""
    con.print_info("Updating system packages...")
    util.run_command(["sudo", "dnf", "update", "-y"], logger=app_logger)
    con.print_success("System updated successfully")


def tune_dnf(app_config):
    con.print_info("Optimizing DNF configuration...")
    block = "\n# Performance optimizations\n" + "\n".join(DNF_TUNING_LINES) + "\n"
    util.write_system_file(DNF_CONF_PATH, block, append=True, logger=app_logger)
    con.print_success("DNF optimized for faster downloads")


def final_update(app_config):
    con.print_info("Performing final system update...")
    util.run_command(["sudo", "dnf", "update", "-y"], logger=app_logger)
    con.print_success("Final system update completed")
