from pathlib import Path

import pytest

from mobuild import sources
from mobuild.libraries import Arch, BuildConfig

BUILD = Path("root") / "build"
PREFIX = "https://example.com/prebuilt/"


@pytest.fixture
def config():
    return BuildConfig(
        build_path=BUILD,
        versions={
            "bzip2": "1.0.8",
            "explorerpp": "1.3.5",
            "fmt": "8.1.1",
            "libbsarch": "0.0.9",
            "libloot": "0.19.3",
            "lz4": "v1.9.3",
            "sevenz": "19.00",
            "spdlog": "v1.10.0",
            "zlib": "v1.2.11",
        },
        prebuilt_url_prefix=PREFIX,
    )


def test_bzip2(config):
    url = sources.bzip2_source_url(config)
    assert str(url) == "https://sourceware.org/pub/bzip2/" + "bzip2-1.0.8" + ".tar.gz"
    assert url.filename() == sources.bzip2_source_path(config).name + ".tar.gz"
    assert sources.bzip2_source_path(config).parent == BUILD


def test_boost_di_path(config):
    assert sources.boost_di_source_path(config) == BUILD / "di"


def test_explorerpp(config):
    url = str(sources.explorerpp_source_url(config))
    assert url.startswith("https://explorerplusplus.com/software/")
    assert url.endswith("_1.3.5_x64.zip")
    assert sources.explorerpp_source_path(config) == BUILD / "explorer++"


def test_fmt(config):
    url = sources.fmt_source_url(config)
    assert str(url).startswith("https://github.com/fmtlib/fmt/releases/download/8.1.1/")
    assert url.filename() == sources.fmt_source_path(config).name + ".zip"


def test_gtest(config):
    assert sources.gtest_source_path(config) == BUILD / "googletest"
    assert sources.gtest_build_dir(Arch.X64) == "build"
    assert sources.gtest_build_dir(Arch.X86) == "build_32"


def test_libbsarch(config):
    url = sources.libbsarch_source_url(config)
    path = sources.libbsarch_source_path(config)
    assert url.filename() == path.name + ".7z"
    assert "/releases/download/0.0.9/" in str(url)
    assert path.name.endswith("-release-x64")


def test_libffi(config):
    root = sources.libffi_source_path(config)
    assert root == BUILD / "libffi"
    assert sources.libffi_include_path(config) == root / "amd64" / "include"
    assert sources.libffi_lib_path(config) == root / "amd64"
    assert sources.libffi_include_path(config).parent == sources.libffi_lib_path(config)


def test_libloot(config):
    url = sources.libloot_source_url(config)
    path = sources.libloot_source_path(config)
    assert url.filename() == path.name + ".7z"
    assert str(url).startswith("https://github.com/loot/libloot/releases/download/")
    assert path.name.endswith("win64")


def test_lz4(config):
    root = sources.lz4_source_path(config)
    assert root.parent == BUILD
    assert str(sources.lz4_prebuilt_url(config)).startswith(PREFIX)
    assert sources.lz4_prebuilt_url(config).filename().startswith("lz4_prebuilt_")
    sln = sources.lz4_solution_file(config)
    assert sln.name == "lz4.sln"
    assert sln.parent == root / "build" / "VS2022"


def test_pybind11(config):
    assert sources.pybind11_source_path(config) == BUILD / "pybind11"


def test_sevenz(config):
    assert str(sources.sevenz_source_url(config)) == "https://www.7-zip.org/a/7z1900-src.7z"
    root = sources.sevenz_source_path(config)
    assert root.parent == BUILD
    module = sources.sevenz_module_path(config)
    assert module == root / "CPP" / "7zip" / "Bundles" / "Format7zF"


def test_spdlog_and_zlib(config):
    assert sources.spdlog_source_path(config).parent == BUILD
    assert sources.zlib_source_path(config).parent == BUILD
    assert sources.spdlog_source_path(config) != sources.zlib_source_path(config)


@pytest.mark.parametrize(
    "func",
    [
        sources.bzip2_source_url,
        sources.fmt_source_path,
        sources.libloot_source_path,
        sources.sevenz_source_url,
        sources.zlib_source_path,
    ],
)
def test_missing_version_raises(func):
    empty = BuildConfig(build_path=BUILD)
    with pytest.raises(KeyError):
        func(empty)


def test_versionless_paths_need_no_version():
    empty = BuildConfig(build_path=BUILD)
    assert sources.boost_di_source_path(empty) == BUILD / "di"
    assert sources.libffi_lib_path(empty) == BUILD / "libffi" / "amd64"