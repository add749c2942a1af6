# mobuild

`mobuild` describes where Mod Organizer's third-party libraries come from and
where they are laid out in a build tree. It computes versions, source paths,
download URLs and build arguments from a configuration. It also has a small
threaded HTTP downloader.

## Modules

- `mobuild.net`
  - `Url` wraps a URL string. `filename()` returns the last path component and
    raises `ValueError` for a bad URL. `empty()` reports whether the URL is empty.
  - `Downloader` downloads a URL in a thread. With `file()`, it writes to a file
    that is created on the first write. The file is deleted again if the
    download fails or is interrupted. Without `file()`, the content is kept in
    memory and read with `output()` or `steal_output()`. The methods `url()`,
    `file()`, `header()`, `start()` and `join()` chain. `interrupt()` stops a
    running download. `ok()` is true only after an HTTP 200. With
    `Downloader(dry=True)`, `start()` does nothing.
  - `a_bit_too_much(text)` flags transport debug lines that are too noisy to log.
- `mobuild.libraries`
  - `BuildConfig` holds the build directory, the versions, the prebuilt
    switches, the prebuilt URL prefix and the Visual Studio toolset.
    `version(name)` raises `KeyError` for a missing version.
  - `Arch` is the target architecture: `X86`, `X64` or `DONT_CARE`.
  - `Boost`, `OpenSSL` and `Python` give version parsing, paths and URLs.
    `Boost.b2_arguments(...)` builds b2 command lines, and
    `BOOST_B2_VARIANTS` lists the variants that are built.
    `OpenSSL.output_names()` gives the dll and pdb base names.
  - A version string that cannot be parsed raises `VersionError`.
- `mobuild.sources` has functions for the smaller dependencies: bzip2,
  boost-di, explorer++, fmt, gtest, libbsarch, libffi, libloot, lz4, pybind11,
  7z, spdlog and zlib. Examples are `fmt_source_url(config)`,
  `lz4_solution_file(config)`, `sevenz_module_path(config)` and
  `gtest_build_dir(arch)`. `GIT_SOURCES` lists the git organisation,
  repository and fixed branch of each cloned dependency.
- `mobuild.pyqt`
  - `Sip` gives the source path, the cached download, the module source path,
    the `sip-module.exe` and `sip-install.exe` paths and the generated `sip.h`.
  - `PyQt` gives the PyQt6 source and prebuilt URLs, the build path and the
    `PyQt6_sip` archive name.
- `mobuild.prebuilts`
  - `releases(config)` returns the stylesheet `Release` list.
    `release_url`, `release_build_path`, `release_content_path` and
    `release_cache_file` give each release's URL and locations.
  - `prebuilt_directory_name(arch)` and `appveyor_artifacts(arch)` give the
    usvfs prebuilt artifacts.

## Installation

```
pip install .
```

## Example

```python
from pathlib import Path

from mobuild.libraries import Arch, Boost, BuildConfig, OpenSSL
from mobuild.net import Downloader

config = BuildConfig(
    build_path=Path("build"),
    versions={"boost": "1.72.0-b1", "boost_vs": "14.3", "openssl": "1.1.1d"},
)

boost = Boost(config)
print(boost.source_path())             # build/boost_1_72_0
print(boost.root_lib_path(Arch.X86))   # build/boost_1_72_0/lib32-msvc-14.3
print(boost.source_url().filename())   # boost_1_72_0_b1.7z
print(OpenSSL(config).output_names())  # ['libcrypto-1_1-x64', 'libssl-1_1-x64']

dl = Downloader().url(boost.source_url()).file("downloads/boost.7z")
dl.start().join()
print(dl.ok())
```

## What it does not do

The package computes paths, URLs and arguments, and it can download files.
It does not provide:

- a task runner;
- a command-line tool;
- any way of extracting archives, cloning repositories or running build tools
  such as cmake, msbuild, b2, nmake or pip.

## Tests

```
pip install .[test]
pytest
```