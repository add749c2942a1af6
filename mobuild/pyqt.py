"""Paths and URLs for sip and PyQt6.

If one of python, sip and PyQt is built from source, all three are, plus
openssl because python needs it.  sip is installed with pip into python's
Scripts directory, which gives sip-install.exe and sip-module.exe.
`sip-module.exe --sip-h` generates sip.h, which is copied into python's
include directory.  PyQt is built with sip-install.exe.
`sip-module.exe --sdist` then creates the PyQt6_sip archive in the download
cache, and that archive is installed with pip.
"""

from __future__ import annotations

import re
from pathlib import Path

from .libraries import BuildConfig, Python, VersionError
from .net import Url

# 12.7.2, .2 is optional
_SIP_MODULE_RE = re.compile(r"([0-9]+)\.([0-9]+)(?:\.([0-9]+))?")


def _cache_path(config: BuildConfig) -> Path:
    # downloads live next to the build directory
    return config.build_path.parent / "downloads"


class Sip:
    """sip paths and files."""

    def __init__(self, config: BuildConfig) -> None:
        self.config = config

    @property
    def version(self) -> str:
        return self.config.version("sip")

    @property
    def version_for_pyqt(self) -> str:
        return self.config.version("pyqt_sip")

    @property
    def prebuilt(self) -> bool:
        # sip is always built from source
        return False

    def source_path(self) -> Path:
        """Something like build/sip-6.6.2."""
        return self.config.build_path / f"sip-{self.version}"

    def download_file(self) -> Path:
        """The source archive downloaded by pip into the cache."""
        return _cache_path(self.config) / f"sip-{self.version}.tar.gz"

    def _version_for_module_source(self) -> str:
        s = self.version_for_pyqt
        m = _SIP_MODULE_RE.fullmatch(s)
        if m is None:
            raise VersionError(f"bad pyqt sip version {s}")
        return m.group(1)

    def module_source_path(self) -> Path:
        """Directory of the sip module sources for the PyQt sip version."""
        return (
            self.source_path()
            / "sipbuild"
            / "module"
            / "source"
            / self._version_for_module_source()
        )

    def sip_module_exe(self) -> Path:
        """sip-module.exe in python's Scripts directory."""
        return Python(self.config).scripts_path() / "sip-module.exe"

    def sip_install_exe(self) -> Path:
        """sip-install.exe in python's Scripts directory."""
        return Python(self.config).scripts_path() / "sip-install.exe"

    def header_file(self) -> Path:
        """The sip.h generated by sip-module.exe, copied into python's includes."""
        return self.source_path() / "sip.h"


class PyQt:
    """PyQt6 paths, URLs and files."""

    def __init__(self, config: BuildConfig) -> None:
        self.config = config

    @property
    def version(self) -> str:
        return self.config.version("pyqt")

    @property
    def builder_version(self) -> str:
        return self.config.version("pyqt_builder")

    @property
    def prebuilt(self) -> bool:
        return self.config.is_prebuilt("pyqt")

    def source_path(self) -> Path:
        """Something like build/PyQt6-6.3.0."""
        return self.config.build_path / f"PyQt6-{self.version}"

    def build_path(self) -> Path:
        """Directory where sip-install.exe builds the modules."""
        return self.source_path() / "build"

    def source_url(self) -> Url:
        """URL of the source archive."""
        return Url(
            "https://pypi.io/packages/source/P/PyQt6/"
            f"PyQt6-{self.version}.tar.gz"
        )

    def prebuilt_url(self) -> Url:
        """URL of the prebuilt archive."""
        return self.config.prebuilt_url(f"PyQt6_gpl-prebuilt-{self.version}.7z")

    def sip_install_file(self) -> Path:
        """Name of the archive created by `sip-module.exe --sdist`."""
        return Path(f"PyQt6_sip-{Sip(self.config).version_for_pyqt}.tar.gz")

    def sip_install_path(self) -> Path:
        """Where the sip archive is created, in the download cache."""
        return _cache_path(self.config) / self.sip_install_file()

    def sip_module_name(self) -> str:
        """The sip module name, used by both pyqt and sip."""
        return "PyQt6.sip"