# fedora-postinstall/fedora_postinstall/__main__.py

import sys

from rich.markup import escape

from fedora_postinstall import console_output as con
from fedora_postinstall.config import CONFIG_FILE_NAME
from fedora_postinstall.config_loader import load_configuration
from fedora_postinstall.logger_utils import app_logger
from fedora_postinstall.pipeline import run_pipeline


def main():
    """Runs the Fedora post-install configuration from start to finish."""
    app_logger.info("Fedora post-install setup started.")
    con.print_info("Starting Fedora Post-Install Configuration...")

    try:
        app_config = load_configuration(CONFIG_FILE_NAME)
        run_pipeline(app_config)
    except KeyboardInterrupt:
        app_logger.warning("Run interrupted by user.")
        con.print_error("Operation cancelled by user.", exit_after=True, exit_code=130)
    except Exception as e:
        app_logger.critical(f"An unexpected critical error occurred: {e}", exc_info=True)
        con.print_error(f"An unexpected critical error occurred: {escape(str(e))}. Check the log file for details.", exit_after=True)
    finally:
        app_logger.info("Fedora post-install setup finished.")


if __name__ == "__main__":
    sys.exit(main())
