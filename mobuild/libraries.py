"""Version parsing, paths and URLs for boost, openssl and python."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .net import Url


class Arch(enum.Enum):
    """Target architecture."""

    X86 = "x86"
    X64 = "x64"
    DONT_CARE = "dont_care"


class VersionError(ValueError):
    """Raised when a configured version string cannot be parsed."""


@dataclass(frozen=True)
class BuildConfig:
    """Versions, prebuilt switches and paths shared by the library tasks."""

    build_path: Path
    versions: Mapping[str, str] = field(default_factory=dict)
    prebuilts: Mapping[str, bool] = field(default_factory=dict)
    prebuilt_url_prefix: str = ""
    vs_toolset: str = "14.3"

    def version(self, name: str) -> str:
        """The configured version for a task; KeyError if it is missing."""
        try:
            return self.versions[name]
        except KeyError:
            raise KeyError(f"no version configured for '{name}'") from None

    def is_prebuilt(self, name: str) -> bool:
        """Whether the task should use its prebuilt archive."""
        return bool(self.prebuilts.get(name, False))

    def prebuilt_url(self, filename: str) -> Url:
        """URL of a prebuilt archive."""
        return Url(self.prebuilt_url_prefix + filename)


@dataclass(frozen=True)
class BoostVersion:
    major: str
    minor: str
    patch: str = ""
    rest: str = ""


@dataclass(frozen=True)
class OpenSSLVersion:
    major: str
    minor: str = ""
    patch: str = ""


@dataclass(frozen=True)
class PythonVersion:
    major: str
    minor: str
    patch: str = ""


# 1.72.0-b1-rc1, everything but 1.72 is optional
_BOOST_RE = re.compile(r"([0-9]+)\.([0-9]+)(?:\.([0-9]+)(?:-(.+))?)?")

# 1.2.3d, everything but 1 is optional
_OPENSSL_RE = re.compile(r"([0-9]+)(?:\.([0-9]+)(?:\.([0-9]+)([a-zA-Z]+)?)?)?")

# v3.8.1, v and .1 are optional
_PYTHON_RE = re.compile(r"v?([0-9]+)\.([0-9]+)(?:\.([0-9]+))?")

# components built for each (link, runtime link, arch) combination; some
# libraries only need some variants
BOOST_B2_VARIANTS = (
    (("thread", "date_time", "filesystem", "locale", "program_options"),
     "static", "static", Arch.X64),
    (("thread", "date_time", "filesystem", "locale"),
     "static", "static", Arch.X86),
    (("thread", "date_time", "locale", "program_options"),
     "static", "shared", Arch.X64),
    (("thread", "date_time", "atomic"),
     "shared", "shared", Arch.X64),
)


def _address_model(arch: Arch) -> str:
    if arch is Arch.X86:
        return "32"
    if arch in (Arch.X64, Arch.DONT_CARE):
        return "64"
    raise ValueError("boost: bad arch")


class Boost:
    """Boost paths, URLs and build arguments."""

    def __init__(self, config: BuildConfig) -> None:
        self.config = config

    @property
    def version(self) -> str:
        return self.config.version("boost")

    @property
    def version_vs(self) -> str:
        return self.config.version("boost_vs")

    def parsed_version(self) -> BoostVersion:
        """Splits the version into major, minor, patch and the rest."""
        s = self.version
        m = _BOOST_RE.fullmatch(s)
        if m is None:
            raise VersionError(f"bad boost version '{s}'")
        return BoostVersion(*(g or "" for g in m.groups()))

    def _version_no_tags(self) -> str:
        v = self.parsed_version()
        s = f"{v.major}.{v.minor}"
        if v.patch:
            s += f".{v.patch}"
        return s

    def _version_all_underscores(self) -> str:
        v = self.parsed_version()
        s = f"boost_{v.major}_{v.minor}"
        if v.patch:
            s += f"_{v.patch}"
        if v.rest:
            s += "_" + v.rest.replace("-", "_")
        return s

    def source_path(self) -> Path:
        """Something like build/boost_1_74_0."""
        return self.config.build_path / (
            "boost_" + self._version_no_tags().replace(".", "_")
        )

    def root_lib_path(self, arch: Arch) -> Path:
        """Something like build/boost_1_74_0/lib64-msvc-14.2."""
        lib = f"lib{_address_model(arch)}-msvc-{self.version_vs}"
        return self.source_path() / lib

    def lib_path(self, arch: Arch) -> Path:
        """Something like build/boost_1_74_0/lib64-msvc-14.2/lib."""
        return self.root_lib_path(arch) / "lib"

    def config_jam_file(self) -> Path:
        return self.source_path() / "user-config-64.jam"

    def b2_exe(self) -> Path:
        return self.source_path() / "b2.exe"

    def source_url(self) -> Url:
        """URL of the source archive."""
        return Url(
            "https://boostorg.jfrog.io/artifactory/main/release/"
            + self._version_no_tags()
            + "/source/"
            + self._version_all_underscores()
            + ".7z"
        )

    def prebuilt_url(self) -> Url:
        """URL of the prebuilt archive."""
        underscores = self.version.replace(".", "_")
        return self.config.prebuilt_url(f"boost_prebuilt_{underscores}.7z")

    def b2_arguments(
        self, components: Iterable[str], link: str, runtime_link: str, arch: Arch
    ) -> list[str]:
        """Command line arguments for b2 for one build variant."""
        root_lib = self.root_lib_path(arch)
        return [
            f"address-model={_address_model(arch)}",
            f"link={link}",
            f"runtime-link={runtime_link}",
            f"toolset=msvc-{self.config.vs_toolset}",
            f"--user-config={self.config_jam_file()}",
            f"--stagedir={root_lib}",
            f"--libdir={root_lib}",
            *(f"--with-{c}" for c in components),
        ]


class OpenSSL:
    """OpenSSL paths, URLs and output names."""

    def __init__(self, config: BuildConfig) -> None:
        self.config = config

    @property
    def version(self) -> str:
        return self.config.version("openssl")

    def parsed_version(self) -> OpenSSLVersion:
        """Splits the version into major, minor and patch."""
        s = self.version
        m = _OPENSSL_RE.fullmatch(s)
        if m is None:
            raise VersionError(f"bad openssl version '{s}'")
        major, minor, patch, _letters = m.groups()
        return OpenSSLVersion(major, minor or "", patch or "")

    def source_path(self) -> Path:
        return self.config.build_path / f"openssl-{self.version}"

    def build_path(self) -> Path:
        return self.source_path() / "build"

    def bin_path(self) -> Path:
        return self.build_path() / "bin"

    def include_path(self) -> Path:
        return self.source_path() / "include"

    def output_names(self) -> list[str]:
        """Dll and pdb file names, without extension."""
        v = self.parsed_version()
        s = v.major
        if v.minor:
            s += f"_{v.minor}"
        return [f"libcrypto-{s}-x64", f"libssl-{s}-x64"]

    def source_url(self) -> Url:
        return Url(f"https://www.openssl.org/source/openssl-{self.version}.tar.gz")

    def prebuilt_url(self) -> Url:
        return self.config.prebuilt_url(f"openssl-prebuilt-{self.version}.7z")


PYTHON_MSBUILD_TARGETS = (
    "python", "pythonw", "python3dll", "select", "pyexpat",
    "unicodedata", "_queue", "_bz2", "_ssl", "_overlapped",
)


class Python:
    """Python paths and URLs."""

    def __init__(self, config: BuildConfig) -> None:
        self.config = config

    @property
    def version(self) -> str:
        return self.config.version("python")

    def parsed_version(self) -> PythonVersion:
        """Splits the version into major, minor and patch; 'v' is dropped."""
        s = self.version
        m = _PYTHON_RE.fullmatch(s)
        if m is None:
            raise VersionError(f"bad python version '{s}'")
        major, minor, patch = m.groups()
        return PythonVersion(major, minor, patch or "")

    def _version_without_v(self) -> str:
        v = self.parsed_version()
        s = f"{v.major}.{v.minor}"
        if v.patch:
            s += f".{v.patch}"
        return s

    def _version_for_dll(self) -> str:
        v = self.parsed_version()
        return v.major + v.minor

    def source_path(self) -> Path:
        """build/python-XX"""
        return self.config.build_path / f"python-{self._version_without_v()}"

    def build_path(self) -> Path:
        """build/python-XX/PCBuild/amd64"""
        return self.source_path() / "PCBuild" / "amd64"

    def python_exe(self) -> Path:
        return self.build_path() / "python.exe"

    def include_path(self) -> Path:
        return self.source_path() / "Include"

    def scripts_path(self) -> Path:
        return self.source_path() / "Scripts"

    def site_packages_path(self) -> Path:
        return self.source_path() / "Lib" / "site-packages"

    def solution_file(self) -> Path:
        return self.source_path() / "PCBuild" / "pcbuild.sln"

    def prebuilt_url(self) -> Url:
        return self.config.prebuilt_url(
            f"python-prebuilt-{self._version_without_v()}.7z"
        )

    def core_zip_file(self) -> Path:
        """The zip holding the packaged standard library."""
        return (
            self.build_path() / "pythoncore" / f"python{self._version_for_dll()}.zip"
        )