# fedora-postinstall/fedora_postinstall/console_output.py

import sys # Needed for sys.exit in print_error
from typing import Any
from rich.console import Console
from rich.rule import Rule
from rich.padding import Padding

# Initialize a global console object
# highlight=False to prevent Rich from trying to auto-highlight package names and paths.
console = Console(highlight=False)

# --- Output Functions ---

def print_info(message: Any, icon: bool = True):
    """Prints an informational message using Rich markup."""
    prefix = "[bold blue][INFO][/] " if icon else ""
    console.print(f"{prefix}{message}")

def print_warning(message: Any, icon: bool = True):
    """Prints a warning message using Rich markup."""
    prefix = "[bold yellow][WARNING][/] " if icon else ""
    console.print(f"{prefix}{message}")

def print_error(
    message: Any,
    icon: bool = True,
    exit_after: bool = False,
    exit_code: int = 1
):
    """
    Prints an error message using Rich markup.
    Optionally exits the program with the given exit_code.
    """
    prefix = "[bold red][ERROR][/] " if icon else ""
    console.print(f"{prefix}[bold red]{message}[/]")
    if exit_after:
        console.print(f"[dim red]Exiting with code {exit_code}...[/]")
        sys.exit(exit_code)

def print_success(message: Any, icon: bool = True):
    """Prints a success message using Rich markup."""
    prefix = "[bold green][SUCCESS][/] " if icon else ""
    console.print(f"{prefix}{message}")

def print_step(title: str, char: str = "="):
    """
    Prints a stage title, styled as a Rich Rule.
    Example: print_step("1. System Update")
    """
    console.print(Rule(f"[bold magenta]{title}[/]", style="magenta", characters=char))

def print_sub_step(message: str, indent: int = 2):
    """
    Prints a sub-step message, slightly indented, with a leading marker.
    Example: print_sub_step("Downloading and installing Inter font...")
    """
    # Padding is (top, right, bottom, left)
    console.print(Padding(f"[bright_blue]❯[/] {message}", (0, 0, 0, indent)))
