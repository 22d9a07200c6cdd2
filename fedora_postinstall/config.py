# fedora-postinstall/fedora_postinstall/config.py

from pathlib import Path

# --- Constants ---
CONFIG_FILE_NAME = "packages.json"

# Manifests are always read from the directory the script is run from.
PKG_MANIFEST_NAME = "pkg.txt"
FLATPAK_MANIFEST_NAME = "fpk.txt"

DNF_CONF_PATH = Path("/etc/dnf/dnf.conf")
SYSCTL_CONF_PATH = Path("/etc/sysctl.conf")
SYSTEMD_RESOLVED_CONF_PATH = Path("/etc/systemd/resolved.conf")

FLATHUB_REMOTE_NAME = "flathub"
FLATHUB_REPO_URL = "https://dl.flathub.org/repo/flathub.flatpakrepo"

RPMFUSION_RELEASE_URLS = [
    "https://mirrors.rpmfusion.org/free/fedora/rpmfusion-free-release-{release}.noarch.rpm",
    "https://mirrors.rpmfusion.org/nonfree/fedora/rpmfusion-nonfree-release-{release}.noarch.rpm",
]
EXTRA_REPOSITORIES = ["fedora-cisco-openh264"]

DNF_TUNING_LINES = [
    "max_parallel_downloads=10",
    "fastestmirror=True",
    "deltarpm=True",
]

SWAPPINESS_LINE = "vm.swappiness=10"

# --- Package lists (overridable through packages.json) ---
MULTIMEDIA_PACKAGES = [
    "@multimedia",
    "ffmpeg",
    "gstreamer1-plugins-bad-*",
    "gstreamer1-plugins-good-*",
    "gstreamer1-plugins-base",
    "gstreamer1-plugin-openh264",
    "gstreamer1-libav",
    "lame*",
]
MULTIMEDIA_EXCLUDES = ["gstreamer1-plugins-bad-free-devel"]

DEV_TOOLS_GROUP = "Development Tools"
DEV_TOOLS = [
    "git",
    "curl",
    "wget",
    "vim",
    "neofetch",
    "htop",
    "tree",
    "unzip",
    "p7zip",
    "p7zip-plugins",
]

REQUIRED_PACKAGES = [
    "gnome-tweaks",
    "bottles",
    "wine",
    "steam",
    "preload", # For faster app startup
]

FLATPAK_PACKAGES = [
    "com.discordapp.Discord",
]

ADDITIONAL_APPS = [
    "gnome-extensions-app",
    "dconf-editor",
    "timeshift",
    "keepassxc",
    "firefox",
    "thunderbird",
    "libreoffice",
    "gimp",
    "vlc",
    "transmission",
]

# --- DNS (systemd-resolved) ---
DNS_SERVERS = ["1.1.1.1", "1.0.0.1", "2606:4700:4700::1111", "2606:4700:4700::1001"]
FALLBACK_DNS_SERVERS = ["8.8.8.8", "8.8.4.4"]

# --- Fonts ---
FONTS_DIR = Path.home() / ".local" / "share" / "fonts"

FONT_SOURCES = {
    "inter": {
        "name": "Inter",
        "url": "https://github.com/rsms/inter/releases/latest/download/Inter.zip",
    },
    "jetbrains-mono": {
        "name": "JetBrains Mono",
        "url": "https://download.jetbrains.com/fonts/JetBrainsMono-2.304.zip",
    },
}

# (schema, key, value) triples applied with gsettings after the fonts land.
FONT_SETTINGS = [
    ("org.gnome.desktop.interface", "font-name", "Inter 11"),
    ("org.gnome.desktop.interface", "document-font-name", "Inter 11"),
    ("org.gnome.desktop.interface", "monospace-font-name", "JetBrains Mono 10"),
    ("org.gnome.desktop.wm.preferences", "titlebar-font", "Inter Medium 11"),
]

UPDATE_SETTINGS = [
    ("org.gnome.software", "download-updates", "true"),
    ("org.gnome.software", "download-updates-notify", "true"),
]

# Keys packages.json may override, mapped to their built-in defaults.
DEFAULT_CONFIG = {
    "multimedia_packages": MULTIMEDIA_PACKAGES,
    "dev_tools": DEV_TOOLS,
    "required_packages": REQUIRED_PACKAGES,
    "flatpak_packages": FLATPAK_PACKAGES,
    "additional_apps": ADDITIONAL_APPS,
    "dns_servers": DNS_SERVERS,
    "fallback_dns_servers": FALLBACK_DNS_SERVERS,
}
