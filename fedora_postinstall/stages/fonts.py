# fedora-postinstall/fedora_postinstall/stages/fonts.py

import shutil
import tempfile
from pathlib import Path
from typing import List, Optional

from fedora_postinstall import console_output as con
from fedora_postinstall import system_utils as util
from fedora_postinstall.config import FONT_SETTINGS, FONT_SOURCES, FONTS_DIR
from fedora_postinstall.logger_utils import app_logger


def copy_ttf_files(source_dir: Path, target_dir: Path) -> List[Path]:
    """Copies every *.ttf found under source_dir (recursively) into target_dir."""
    target_dir.mkdir(parents=True, exist_ok=True)
    copied = []
    for font_file in sorted(source_dir.rglob("*.ttf")):
        destination = target_dir / font_file.name
        shutil.copy2(font_file, destination)
        copied.append(destination)
    app_logger.info(f"Copied {len(copied)} font files into {target_dir}")
    return copied


def install_font(family_dir: str, name: str, url: str, fonts_dir: Path = FONTS_DIR) -> List[Path]:
    """Downloads a font archive, extracts it and installs its TrueType files."""
    con.print_sub_step(f"Downloading and installing {name} font...")
    with tempfile.TemporaryDirectory(prefix=f"{family_dir}-") as tmp:
        archive_path = Path(tmp) / f"{family_dir}.zip"
        extract_dir = Path(tmp) / family_dir
        util.run_command(["curl", "-L", url, "-o", str(archive_path)], logger=app_logger)
        util.run_command(["unzip", "-q", str(archive_path), "-d", str(extract_dir)], logger=app_logger)
        return copy_ttf_files(extract_dir, fonts_dir / family_dir)


def install_fonts(app_config, fonts_dir: Optional[Path] = None):
    con.print_info("Installing and configuring fonts...")
    target = fonts_dir or FONTS_DIR
    for family_dir, source in FONT_SOURCES.items():
        install_font(family_dir, source["name"], source["url"], fonts_dir=target)
    util.run_command(["fc-cache", "-f", "-v"], capture_output=True, logger=app_logger)


def configure_fonts(app_config):
    con.print_info("Configuring system fonts...")
    for schema, key, value in FONT_SETTINGS:
        util.gsettings_set(schema, key, value, logger=app_logger)
    con.print_success("Fonts installed and configured")
