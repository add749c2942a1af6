import http.server
import threading

import pytest

from mobuild.net import Downloader, Url, a_bit_too_much

BODY = b"some downloaded content" * 100


class _Handler(http.server.BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/data":
            self._reply(200, BODY)
        elif self.path == "/echo":
            self._reply(200, self.headers.get("X-Test", "").encode())
        elif self.path == "/nocontent":
            self.send_response(204)
            self.end_headers()
        else:
            self._reply(404, b"missing")

    def _reply(self, code, body):
        self.send_response(code)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture
def server():
    httpd = http.server.ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{httpd.server_address[1]}"
    finally:
        httpd.shutdown()
        httpd.server_close()


def test_url_filename_is_last_component():
    assert Url("https://example.com/a/b/file.7z").filename() == "file.7z"


def test_url_filename_without_path_is_empty():
    assert Url("https://example.com").filename() == ""


def test_url_filename_ignores_query():
    assert Url("https://example.com/dir/name.zip?x=1").filename() == "name.zip"


def test_url_bad_raises():
    with pytest.raises(ValueError):
        Url("not a url").filename()


def test_url_empty():
    assert Url().empty()
    assert not Url("https://example.com").empty()
    assert str(Url("https://example.com/x")) == "https://example.com/x"


@pytest.mark.parametrize(
    "line",
    ["schannel: encrypted data got 12", "schannel: client wants to read 5"],
)
def test_noisy_lines(line):
    assert a_bit_too_much(line)


def test_regular_lines_not_noisy():
    assert not a_bit_too_much("Connected to example.com")
    assert not a_bit_too_much("")


def test_download_to_memory(server):
    d = Downloader().url(server + "/data").start().join()
    assert d.ok()
    assert d.output() == BODY


def test_steal_output_clears(server):
    d = Downloader().url(Url(server + "/data")).start().join()
    assert d.steal_output() == BODY
    assert d.output() == b""


def test_download_to_file(server, tmp_path):
    target = tmp_path / "sub" / "out.bin"
    d = Downloader().url(server + "/data").file(target).start().join()
    assert d.ok()
    assert target.read_bytes() == BODY
    assert d.output() == b""


def test_not_found_deletes_file(server, tmp_path):
    target = tmp_path / "out.bin"
    d = Downloader().url(server + "/missing").file(target).start().join()
    assert not d.ok()
    assert not target.exists()


def test_non_200_success_is_not_ok(server):
    d = Downloader().url(server + "/nocontent").start().join()
    assert not d.ok()


def test_headers_are_sent(server):
    d = Downloader().url(server + "/echo").header("X-Test", "value-1").start().join()
    assert d.ok()
    assert d.output() == b"value-1"


def test_interrupt_before_start(server, tmp_path):
    target = tmp_path / "out.bin"
    d = Downloader().url(server + "/data").file(target)
    d.interrupt()
    d.start().join()
    assert not d.ok()
    assert not target.exists()


def test_dry_does_nothing(server, tmp_path):
    target = tmp_path / "out.bin"
    d = Downloader(dry=True).url(server + "/data").file(target).start().join()
    assert not d.ok()
    assert not target.exists()


def test_connection_failure_is_not_ok():
    d = Downloader().url("http://127.0.0.1:1/data").start().join()
    assert not d.ok()
    assert d.output() == b""