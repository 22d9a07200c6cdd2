# fedora-postinstall/fedora_postinstall/system_utils.py

import subprocess
from pathlib import Path
from typing import List, Optional
import logging

from fedora_postinstall.logger_utils import app_logger as default_script_logger


def run_command(
    command: List[str],
    capture_output: bool = False,
    check: bool = True,
    input_text: Optional[str] = None,
    logger: Optional[logging.Logger] = None
) -> subprocess.CompletedProcess:
    """
    Runs an external command and logs it, along with any captured output.

    With check=True a non-zero exit status raises subprocess.CalledProcessError.
    A missing executable raises FileNotFoundError in either mode.
    """
    log = logger or default_script_logger

    if not isinstance(command, list) or not command:
        log.error("Invalid command. Must be a non-empty list.")
        raise TypeError("Command must be a non-empty list of strings.")

    display_command_str = subprocess.list2cmdline([str(item) for item in command])
    log.info(f"Executing: {display_command_str}")

    try:
        process = subprocess.run(
            command,
            check=False, # Checked below so the failure can be logged with its output
            capture_output=capture_output,
            input=input_text,
            text=True,
        )
    except FileNotFoundError:
        executable = command[0]
        log.error(f"Command executable not found: '{executable}' (Full command attempted: '{display_command_str}')")
        raise

    if process.stdout and process.stdout.strip():
        log.debug(f"CMD STDOUT for '{display_command_str}':\n{process.stdout.strip()}")
    if process.stderr and process.stderr.strip():
        # Some tools report progress on stderr, so this is not an error by itself.
        log.warning(f"CMD STDERR for '{display_command_str}':\n{process.stderr.strip()}")

    if check and process.returncode != 0:
        log.error(f"Command '{display_command_str}' returned non-zero exit status {process.returncode}.")
        raise subprocess.CalledProcessError(
            returncode=process.returncode,
            cmd=command,
            output=process.stdout,
            stderr=process.stderr
        )

    return process


def get_fedora_release(logger: Optional[logging.Logger] = None) -> str:
    """Returns the running Fedora release number as reported by 'rpm -E %fedora'."""
    proc = run_command(["rpm", "-E", "%fedora"], capture_output=True, logger=logger)
    release = proc.stdout.strip()
    (logger or default_script_logger).info(f"Detected Fedora release: {release}")
    return release


def write_system_file(
    file_path: Path,
    content: str,
    append: bool = False,
    logger: Optional[logging.Logger] = None
) -> None:
    """Writes (or appends) content to a root-owned file through 'sudo tee'."""
    cmd = ["sudo", "tee"]
    if append:
        cmd.append("-a")
    cmd.append(str(file_path))
    # tee echoes its input; capture it so it lands in the log instead of the terminal.
    run_command(cmd, capture_output=True, input_text=content, logger=logger)


def gsettings_set(schema: str, key: str, value: str, logger: Optional[logging.Logger] = None) -> None:
    run_command(["gsettings", "set", schema, key, value], capture_output=True, logger=logger)


def systemctl(action: str, unit: str, logger: Optional[logging.Logger] = None) -> None:
    run_command(["sudo", "systemctl", action, unit], capture_output=True, logger=logger)


def install_dnf_packages(
    packages: List[str],
    extra_args: Optional[List[str]] = None,
    logger: Optional[logging.Logger] = None
) -> None:
    """Installs packages in a single, unguarded 'dnf install' transaction."""
    cmd = ["sudo", "dnf", "install", "-y"]
    cmd.extend(packages)
    if extra_args:
        cmd.extend(extra_args)
    run_command(cmd, logger=logger)
