# tests/test_stages.py
import zipfile
from pathlib import Path

import pytest

from fedora_postinstall.stages import (
    base_packages,
    desktop_tweaks,
    fonts,
    package_batches,
    repositories,
    system_update,
)


@pytest.fixture(autouse=True)
def quiet_console(mocker):
    mocker.patch("fedora_postinstall.console_output.console.print")


@pytest.fixture
def mock_run_command(mocker):
    return mocker.patch("fedora_postinstall.system_utils.run_command")


def _commands(mock_run_command):
    return [c.args[0] for c in mock_run_command.call_args_list]


def test_required_packages_scenario(app_config, fake_installer_factory, mocker):
    app_config["required_packages"] = ["a", "b"]
    installer = fake_installer_factory(failing={"a"})
    warning = mocker.patch("fedora_postinstall.batch_installer.con.print_warning")
    success = mocker.patch("fedora_postinstall.batch_installer.con.print_success")

    package_batches.install_required_packages(app_config, installer)

    assert installer.calls == ["a", "b"]
    warning.assert_called_once_with("Failed to install a, skipping...")
    success.assert_called_once_with("Installed b")


def test_manifest_packages_read_from_given_directory(app_config, fake_installer_factory, tmp_path):
    (tmp_path / "pkg.txt").write_text("git\n# comment\n\nvim\n", encoding="utf-8")
    installer = fake_installer_factory()

    package_batches.install_manifest_packages(app_config, installer, manifest_dir=tmp_path)

    assert installer.calls == ["git", "vim"]


def test_manifest_flatpaks_missing_file_is_skipped(app_config, fake_installer_factory, tmp_path, mocker):
    warning = mocker.patch("fedora_postinstall.batch_installer.con.print_warning")
    installer = fake_installer_factory()

    package_batches.install_manifest_flatpaks(app_config, installer, manifest_dir=tmp_path)

    assert installer.calls == []
    warning.assert_called_once_with("fpk.txt not found, skipping Flatpak packages installation from file")


def test_flatpak_packages_use_configured_list(app_config, fake_installer_factory):
    installer = fake_installer_factory()

    package_batches.install_flatpak_packages(app_config, installer)

    assert installer.calls == ["com.discordapp.Discord"]


def test_additional_apps_tolerate_failures(app_config, fake_installer_factory):
    app_config["additional_apps"] = ["vlc", "gimp"]
    installer = fake_installer_factory(failing={"vlc"})

    desktop_tweaks.install_additional_apps(app_config, installer)

    assert installer.calls == ["vlc", "gimp"]


def test_update_system_runs_dnf_update(app_config, mock_run_command):
    system_update.update_system(app_config)

    assert _commands(mock_run_command) == [["sudo", "dnf", "update", "-y"]]


def test_tune_dnf_appends_settings(app_config, mock_run_command):
    system_update.tune_dnf(app_config)

    call = mock_run_command.call_args
    assert call.args[0] == ["sudo", "tee", "-a", "/etc/dnf/dnf.conf"]
    assert "max_parallel_downloads=10\nfastestmirror=True\ndeltarpm=True\n" in call.kwargs["input_text"]


def test_enable_rpmfusion_uses_detected_release(app_config, mocker):
    mocker.patch("fedora_postinstall.system_utils.get_fedora_release", return_value="40")
    install = mocker.patch("fedora_postinstall.system_utils.install_dnf_packages")

    repositories.enable_rpmfusion(app_config)

    urls = install.call_args.args[0]
    assert urls[0].endswith("rpmfusion-free-release-40.noarch.rpm")
    assert urls[1].endswith("rpmfusion-nonfree-release-40.noarch.rpm")


def test_enable_flathub_adds_remote_if_missing(app_config, mock_run_command):
    repositories.enable_flathub(app_config)

    assert _commands(mock_run_command) == [[
        "flatpak", "remote-add", "--if-not-exists", "flathub",
        "https://dl.flathub.org/repo/flathub.flatpakrepo",
    ]]


def test_multimedia_codecs_exclude_devel_plugins(app_config, mock_run_command):
    base_packages.install_multimedia_codecs(app_config)

    install_cmd, update_cmd = _commands(mock_run_command)
    assert install_cmd[:4] == ["sudo", "dnf", "install", "-y"]
    assert "@multimedia" in install_cmd
    assert install_cmd[-1] == "--exclude=gstreamer1-plugins-bad-free-devel"
    assert update_cmd == ["sudo", "dnf", "update", "-y", "@core"]


def test_development_tools_installs_group_then_tools(app_config, mock_run_command):
    base_packages.install_development_tools(app_config)

    group_cmd, tools_cmd = _commands(mock_run_command)
    assert group_cmd == ["sudo", "dnf", "groupinstall", "-y", "Development Tools"]
    assert tools_cmd[4:] == app_config["dev_tools"]


def test_render_resolved_conf():
    content = desktop_tweaks.render_resolved_conf(["1.1.1.1", "1.0.0.1"], ["8.8.8.8"])

    assert content == (
        "[Resolve]\n"
        "DNS=1.1.1.1 1.0.0.1\n"
        "FallbackDNS=8.8.8.8\n"
        "DNSSEC=yes\n"
        "Cache=yes\n"
    )


def test_configure_dns_writes_file_then_restarts_resolved(app_config, mock_run_command):
    desktop_tweaks.configure_dns(app_config)

    write_cmd, restart_cmd = _commands(mock_run_command)
    assert write_cmd == ["sudo", "tee", "/etc/systemd/resolved.conf"]
    assert restart_cmd == ["sudo", "systemctl", "restart", "systemd-resolved"]


def test_enable_firewall(app_config, mock_run_command):
    desktop_tweaks.enable_firewall(app_config)

    assert _commands(mock_run_command) == [
        ["sudo", "dnf", "install", "-y", "firewalld"],
        ["sudo", "systemctl", "enable", "firewalld"],
        ["sudo", "systemctl", "start", "firewalld"],
    ]


def test_copy_ttf_files_only_copies_truetype(tmp_path):
    source = tmp_path / "extracted"
    (source / "fonts" / "ttf").mkdir(parents=True)
    (source / "fonts" / "ttf" / "Inter-Regular.ttf").write_bytes(b"ttf")
    (source / "fonts" / "Inter.otf").write_bytes(b"otf")
    (source / "LICENSE.txt").write_text("license")

    copied = fonts.copy_ttf_files(source, tmp_path / "target")

    assert [p.name for p in copied] == ["Inter-Regular.ttf"]
    assert (tmp_path / "target" / "Inter-Regular.ttf").read_bytes() == b"ttf"


def test_install_font_downloads_extracts_and_copies(tmp_path, mocker):
    def fake_run(cmd, **kwargs):
        if cmd[0] == "curl":
            archive = Path(cmd[cmd.index("-o") + 1])
            with zipfile.ZipFile(archive, "w") as zf:
                zf.writestr("JetBrainsMono/fonts/ttf/JetBrainsMono-Bold.ttf", b"bold")
                zf.writestr("JetBrainsMono/OFL.txt", "license")
        elif cmd[0] == "unzip":
            with zipfile.ZipFile(cmd[2]) as zf:
                zf.extractall(cmd[cmd.index("-d") + 1])

    mocker.patch("fedora_postinstall.system_utils.run_command", side_effect=fake_run)

    copied = fonts.install_font("jetbrains-mono", "JetBrains Mono", "https://example.invalid/jb.zip", fonts_dir=tmp_path)

    assert copied == [tmp_path / "jetbrains-mono" / "JetBrainsMono-Bold.ttf"]


def test_configure_fonts_sets_gsettings(app_config, mock_run_command):
    fonts.configure_fonts(app_config)

    assert ["gsettings", "set", "org.gnome.desktop.interface", "monospace-font-name", "JetBrains Mono 10"] in _commands(mock_run_command)
