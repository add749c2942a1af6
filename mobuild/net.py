"""URL helpers and a threaded HTTP downloader."""

from __future__ import annotations

import logging
import threading
import urllib.error
import urllib.request
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO
from urllib.parse import urlsplit

log = logging.getLogger(__name__)

_USER_AGENT = "mobuild downloader"
_CHUNK_SIZE = 64 * 1024

# the transport layer spams these, they are never worth logging
_NOISY_PREFIXES = (
    "schannel: encrypted data",
    "schannel: encrypted cached",
    "schannel: decrypted data",
    "schannel: decrypted cached",
    "schannel: client wants",
    "schannel: failed to decrypt data",
    "schannel: schannel_recv",
    "schannel: Curl_read_plain",
)


def a_bit_too_much(text: str) -> bool:
    """Whether a transport debug line is too noisy to ever be logged."""
    return text.startswith(_NOISY_PREFIXES)


@dataclass(frozen=True)
class Url:
    """A URL string with a few helpers."""

    value: str = ""

    def __str__(self) -> str:
        return self.value

    def empty(self) -> bool:
        """Whether the URL is an empty string."""
        return not self.value

    def filename(self) -> str:
        """Component of the path after the last separator."""
        try:
            parts = urlsplit(self.value)
        except ValueError as e:
            raise ValueError(f"bad url '{self.value}'") from e

        if not parts.scheme or not parts.netloc or any(c.isspace() for c in self.value):
            raise ValueError(f"bad url '{self.value}'")

        path = parts.path or "/"
        return path.rpartition("/")[2]


class Downloader:
    """Downloads a URL in a thread, into a file or into memory."""

    def __init__(self, dry: bool = False) -> None:
        self._dry = dry
        self._url = Url()
        self._path: Path | None = None
        self._headers: list[tuple[str, str]] = []
        self._thread: threading.Thread | None = None
        self._interrupt = threading.Event()
        self._ok = False
        self._output = bytearray()
        self._bytes = 0
        self._file: BinaryIO | None = None

    def url(self, u: Url | str) -> Downloader:
        """Sets the URL to download from."""
        self._url = u if isinstance(u, Url) else Url(u)
        return self

    def file(self, path) -> Downloader:
        """Sets the output file; without one, content is kept in memory."""
        self._path = Path(path) if path else None
        return self

    def header(self, name: str, value: str) -> Downloader:
        """Adds a request header."""
        self._headers.append((name, value))
        return self

    def start(self) -> Downloader:
        """Starts the download in a thread; does nothing in dry mode."""
        self._ok = False
        log.debug("downloading %s to %s", self._url, self._path)

        if self._dry:
            return self

        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()
        return self

    def join(self) -> Downloader:
        """Waits for the download thread to finish."""
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        return self

    def interrupt(self) -> None:
        """Asks the download to stop as soon as possible."""
        log.debug("will interrupt download")
        self._interrupt.set()

    def ok(self) -> bool:
        """Whether the download succeeded; only meaningful after join()."""
        return self._ok

    def output(self) -> bytes:
        """Content retrieved when no output file was set."""
        return bytes(self._output)

    def steal_output(self) -> bytes:
        """Returns the retrieved content and clears it."""
        data = bytes(self._output)
        self._output.clear()
        return data

    def _run(self) -> None:
        log.debug("download: performing %s", self._url)

        headers = {"User-Agent": _USER_AGENT}
        headers.update(self._headers)

        status: int | None = None
        failed = False

        try:
            request = urllib.request.Request(str(self._url), headers=headers)
            with urllib.request.urlopen(request) as response:
                status = response.status
                while not self._interrupt.is_set():
                    chunk = response.read(_CHUNK_SIZE)
                    if not chunk:
                        break
                    self._on_write(chunk)
        except urllib.error.HTTPError as e:
            status = e.code
            e.close()
        except (OSError, ValueError) as e:
            log.error("download: %s %s", e, self._url)
            failed = True
        finally:
            if self._file is not None:
                self._file.flush()
                self._file.close()
                self._file = None

        log.debug("download: transfer finished %s", self._url)

        if self._interrupt.is_set():
            log.debug("download: %s interrupted", self._url)
            self._delete_output()
            return

        if failed:
            self._delete_output()
            return

        if status == 200:
            log.debug(
                "download: http 200 %s, transferred %d bytes", self._url, self._bytes
            )
            self._ok = True
        else:
            log.error("download: http %s %s", status, self._url)
            self._delete_output()

    def _on_write(self, chunk: bytes) -> None:
        if self._interrupt.is_set():
            return

        if not self._create_file():
            self._interrupt.set()
            return

        if self._file is not None:
            try:
                self._file.write(chunk)
            except OSError as e:
                log.error("failed to write to %s, %s", self._path, e)
                self._interrupt.set()
        else:
            self._output.extend(chunk)

        self._bytes += len(chunk)

    def _create_file(self) -> bool:
        # the file is created lazily on first write
        if self._file is not None or self._path is None:
            return True

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            log.debug("opening %s", self._path)
            self._file = self._path.open("wb")
        except OSError as e:
            log.error("failed to open %s, %s", self._path, e)
            return False

        return True

    def _delete_output(self) -> None:
        if self._path is None:
            return
        try:
            self._path.unlink(missing_ok=True)
        except OSError as e:
            log.error("failed to delete %s, %s", self._path, e)