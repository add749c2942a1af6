"""Stylesheet releases and usvfs continuous integration artifacts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .libraries import Arch, BuildConfig
from .net import Url


def _cache_path(config: BuildConfig) -> Path:
    # downloads live next to the build directory
    return config.build_path.parent / "downloads"


@dataclass(frozen=True)
class Release:
    """A stylesheet release on github."""

    user: str
    repo: str
    version: str
    file: str
    top_level_folder: str = ""


def releases(config: BuildConfig) -> list[Release]:
    """All stylesheet releases, with versions taken from the configuration."""
    v = config.version
    return [
        Release("6788-00", "paper-light-and-dark",
                v("ss_paper_lad_6788"), "paper-light-and-dark"),
        Release("6788-00", "paper-automata",
                v("ss_paper_automata_6788"), "3.0.Paper.Automata",
                "2. Paper Automata-64439-A2-3-0-1610629680"),
        Release("6788-00", "paper-mono",
                v("ss_paper_mono_6788"), "Paper-Mono"),
        Release("6788-00", "1809-dark-mode",
                v("ss_dark_mode_1809_6788"), "1809"),
        Release("Trosski", "ModOrganizer_Style_Morrowind",
                v("ss_morrowind_trosski"), "Morrowind-MO2-Stylesheet"),
        Release("Trosski", "Mod-Organizer-2-Skyrim-Stylesheet",
                v("ss_skyrim_trosski"), "Skyrim-MO2-Stylesheet"),
        Release("Trosski", "ModOrganizer_Style_Fallout3",
                v("ss_fallout3_trosski"), "Fallout3-MO2-Stylesheet"),
        Release("Trosski", "Mod-Organizer2-Fallout-4-Stylesheet",
                v("ss_fallout4_trosski"), "Fallout4-MO2-Stylesheet"),
    ]


def release_build_path(config: BuildConfig, release: Release) -> Path:
    """Something like build/paper-mono-v2.1."""
    return config.build_path / f"{release.repo}-{release.version}"


def release_content_path(config: BuildConfig, release: Release) -> Path:
    """Directory whose contents are installed into the stylesheets folder."""
    path = release_build_path(config, release)
    if release.top_level_folder:
        return path / release.top_level_folder
    return path


def release_url(release: Release) -> Url:
    """URL of the release archive on github."""
    return Url(
        f"https://github.com/{release.user}/{release.repo}/releases/"
        f"download/{release.version}/{release.file}.7z"
    )


def release_cache_file(config: BuildConfig, release: Release) -> Path:
    """Where the release archive is downloaded."""
    return _cache_path(config) / f"{release.repo}.7z"


def _arch_name(arch: Arch) -> str:
    if arch is Arch.X86:
        return "x86"
    if arch is Arch.X64:
        return "x64"
    raise ValueError("bad arch")


def prebuilt_directory_name(arch: Arch) -> str:
    """Build directory the usvfs artifacts for an architecture go into."""
    if arch is Arch.X86:
        return "usvfs_bin_32"
    if arch is Arch.X64:
        return "usvfs_bin"
    raise ValueError("bad arch")


def appveyor_artifacts(arch: Arch) -> list[str]:
    """The usvfs artifacts to download for an architecture: pdbs, dll, lib, exe."""
    a = _arch_name(arch)
    return [
        f"lib/usvfs_{a}.pdb",
        f"lib/usvfs_{a}.dll",
        f"lib/usvfs_{a}.lib",
        f"bin/usvfs_proxy_{a}.exe",
        f"bin/usvfs_proxy_{a}.pdb",
    ]