"""Paths and URLs for the smaller third-party dependencies."""

from __future__ import annotations

from pathlib import Path

from .libraries import Arch, BuildConfig
from .net import Url

# git sources: (organisation, repository, fixed branch or None for the
# configured version)
GIT_SOURCES = {
    "boost-di": ("boost-experimental", "di", "cpp14"),
    "gtest": ("google", "googletest", None),
    "libffi": ("python", "cpython-bin-deps", "libffi-3.3.0"),
    "lz4": ("lz4", "lz4", None),
    "pybind11": ("pybind", "pybind11", None),
    "spdlog": ("gabime", "spdlog", None),
    "zlib": ("madler", "zlib", None),
}

# cmake definitions used when building fmt
FMT_CMAKE_DEFINITIONS = {"FMT_TEST": "OFF", "FMT_DOC": "OFF"}

# cmake arguments used when building gtest
GTEST_CMAKE_ARGUMENTS = ("-Wno-deprecated", "-Dgtest_force_shared_crt=ON")

# nmake definitions used when building 7z
SEVENZ_NMAKE_DEFINITIONS = (
    "CPU=x64",
    "NEW_COMPILER=1",
    "MY_STATIC_LINK=1",
    "NO_BUFFEROVERFLOWU=1",
)


# bzip2, required by python, which uses the source files directly

def bzip2_source_url(config: BuildConfig) -> Url:
    """URL of the bzip2 source archive."""
    return Url(
        "https://sourceware.org/pub/bzip2/"
        f"bzip2-{config.version('bzip2')}.tar.gz"
    )


def bzip2_source_path(config: BuildConfig) -> Path:
    """Something like build/bzip2-1.0.8."""
    return config.build_path / f"bzip2-{config.version('bzip2')}"


# boost-di, headers only, needed by bsapacker

def boost_di_source_path(config: BuildConfig) -> Path:
    """Directory of the boost-di clone."""
    return config.build_path / "di"


# explorer++, a direct download

def explorerpp_source_url(config: BuildConfig) -> Url:
    """URL of the explorer++ archive."""
    return Url(
        "https://explorerplusplus.com/software/"
        f"explorer++_{config.version('explorerpp')}_x64.zip"
    )


def explorerpp_source_path(config: BuildConfig) -> Path:
    """Directory the explorer++ archive is extracted into."""
    return config.build_path / "explorer++"


# fmt

def fmt_source_url(config: BuildConfig) -> Url:
    """URL of the fmt release archive."""
    v = config.version("fmt")
    return Url(f"https://github.com/fmtlib/fmt/releases/download/{v}/fmt-{v}.zip")


def fmt_source_path(config: BuildConfig) -> Path:
    """Something like build/fmt-8.1.1."""
    return config.build_path / f"fmt-{config.version('fmt')}"


# gtest

def gtest_source_path(config: BuildConfig) -> Path:
    """Directory of the googletest clone."""
    return config.build_path / "googletest"


def gtest_build_dir(arch: Arch) -> str:
    """Name of the cmake prefix directory for the given architecture."""
    return "build" if arch is Arch.X64 else "build_32"


# libbsarch

def _libbsarch_dir_name(config: BuildConfig) -> str:
    return f"libbsarch-{config.version('libbsarch')}-release-x64"


def libbsarch_source_url(config: BuildConfig) -> Url:
    """URL of the libbsarch release archive."""
    return Url(
        "https://github.com/ModOrganizer2/libbsarch/releases/download/"
        f"{config.version('libbsarch')}/{_libbsarch_dir_name(config)}.7z"
    )


def libbsarch_source_path(config: BuildConfig) -> Path:
    """Directory the libbsarch archive is extracted into."""
    return config.build_path / _libbsarch_dir_name(config)


# libffi, required by python

def libffi_source_path(config: BuildConfig) -> Path:
    """Directory of the libffi clone."""
    return config.build_path / "libffi"


def libffi_include_path(config: BuildConfig) -> Path:
    """Include directory of libffi."""
    return libffi_source_path(config) / "amd64" / "include"


def libffi_lib_path(config: BuildConfig) -> Path:
    """Library directory of libffi."""
    return libffi_source_path(config) / "amd64"


# libloot

def _libloot_release_name(config: BuildConfig) -> str:
    # libloot-version-win64, such as libloot-0.19.3-win64
    return f"libloot-{config.version('libloot')}-win64"


def libloot_source_url(config: BuildConfig) -> Url:
    """URL of the libloot release archive."""
    return Url(
        "https://github.com/loot/libloot/releases/download/"
        f"{config.version('libloot')}/{_libloot_release_name(config)}.7z"
    )


def libloot_source_path(config: BuildConfig) -> Path:
    """Directory the libloot archive is extracted into."""
    return config.build_path / _libloot_release_name(config)


# lz4

def lz4_source_path(config: BuildConfig) -> Path:
    """Something like build/lz4-v1.9.3."""
    return config.build_path / f"lz4-{config.version('lz4')}"


def lz4_prebuilt_url(config: BuildConfig) -> Url:
    """URL of the lz4 prebuilt archive."""
    return config.prebuilt_url(f"lz4_prebuilt_{config.version('lz4')}.7z")


def _lz4_solution_dir(config: BuildConfig) -> Path:
    return lz4_source_path(config) / "build" / "VS2022"


def lz4_solution_file(config: BuildConfig) -> Path:
    """The visual studio solution used to build lz4."""
    return _lz4_solution_dir(config) / "lz4.sln"


def _lz4_out_dir(config: BuildConfig) -> Path:
    return _lz4_solution_dir(config) / "bin" / "x64_Release"


# pybind11, headers only

def pybind11_source_path(config: BuildConfig) -> Path:
    """Directory of the pybind11 clone."""
    return config.build_path / "pybind11"


# 7z, only the dll is built

def sevenz_source_url(config: BuildConfig) -> Url:
    """URL of the 7z source archive; dots are dropped from the version."""
    v = config.version("sevenz").replace(".", "")
    return Url(f"https://www.7-zip.org/a/7z{v}-src.7z")


def sevenz_source_path(config: BuildConfig) -> Path:
    """Something like build/7zip-19.00."""
    return config.build_path / f"7zip-{config.version('sevenz')}"


def sevenz_module_path(config: BuildConfig) -> Path:
    """The 7z module that builds the dll."""
    return sevenz_source_path(config) / "CPP" / "7zip" / "Bundles" / "Format7zF"


# spdlog

def spdlog_source_path(config: BuildConfig) -> Path:
    """Something like build/spdlog-v1.10.0."""
    return config.build_path / f"spdlog-{config.version('spdlog')}"


# zlib

def zlib_source_path(config: BuildConfig) -> Path:
    """Something like build/zlib-v1.2.11."""
    return config.build_path / f"zlib-{config.version('zlib')}"