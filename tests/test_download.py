import io
import json
import urllib.error
import zipfile
from unittest import mock

import pytest

from swaggerserve.download import (
    DownloadError,
    DownloadOptions,
    GitHubRelease,
    download,
    get_latest_version,
    process_swagger_ui,
)
from swaggerserve.templates import DEFAULT_CSS, DEFAULT_INITIALIZER


class FakeResponse(io.BytesIO):
    def __init__(self, body: bytes, status: int = 200):
        super().__init__(body)
        self.status = status


def make_zip(files: dict[str, str]) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for name, content in files.items():
            zf.writestr(name, content)
    return buf.getvalue()


def read_zip(data: bytes) -> dict[str, str]:
    with zipfile.ZipFile(io.BytesIO(data)) as zf:
        return {info.filename: zf.read(info).decode() for info in zf.infolist()}


FULL_RELEASE = {
    "swagger-ui-5.0.0/dist/index.html": "<html><head></head><body>Test</body></html>",
    "swagger-ui-5.0.0/dist/swagger-ui.css": ".swagger-ui {} //# sourceMappingURL=test.map",
    "swagger-ui-5.0.0/dist/swagger-ui-bundle.js": "window.SwaggerUIBundle = {}; //# sourceMappingURL=bundle.map",
    "swagger-ui-5.0.0/dist/swagger-initializer.js": "window.onload = function() {};",
    "swagger-ui-5.0.0/dist/test.map": "source map content",
    "swagger-ui-5.0.0/dist/swagger-ui-es-bundle.js": "es module",
    "swagger-ui-5.0.0/README.md": "not included",
}

MINIMAL_RELEASE = {"swagger-ui-5.0.0/dist/index.html": "<html><head></head><body>Mock</body></html>"}


def test_process_swagger_ui_applies_customisations():
    options = DownloadOptions(custom_css=".custom {}", custom_initializer="window.custom = true;")
    files = read_zip(process_swagger_ui(make_zip(FULL_RELEASE), "v5.0.0", options))

    assert "custom-styles.css" in files["index.html"]
    assert files["swagger-initializer.js"] == "window.custom = true;"
    assert files["custom-styles.css"] == ".custom {}"
    assert "sourceMappingURL" not in files["swagger-ui.css"]
    assert "sourceMappingURL" not in files["swagger-ui-bundle.js"]
    assert "test.map" not in files
    assert "swagger-ui-es-bundle.js" not in files
    assert "README.md" not in files


def test_process_swagger_ui_exact_contents():
    options = DownloadOptions(custom_css=".custom {}")
    files = read_zip(process_swagger_ui(make_zip(FULL_RELEASE), "v5.0.0", options))
    assert files["swagger-ui.css"] == ".swagger-ui {} "
    assert files["index.html"] == (
        '<html><head><link rel="stylesheet" type="text/css" href="custom-styles.css">\n'
        "</head><body>Test</body></html>"
    )
    assert files["swagger-initializer.js"] == "window.onload = function() {};"
    assert sorted(files) == [
        "custom-styles.css",
        "index.html",
        "swagger-initializer.js",
        "swagger-ui-bundle.js",
        "swagger-ui.css",
    ]


def test_process_swagger_ui_without_customisations():
    files = read_zip(process_swagger_ui(make_zip(MINIMAL_RELEASE), "v5.0.0", DownloadOptions()))
    assert "custom-styles.css" not in files
    assert files["index.html"] == "<html><head></head><body>Mock</body></html>"


def test_process_accepts_version_without_prefix():
    files = read_zip(process_swagger_ui(make_zip(MINIMAL_RELEASE), "5.0.0", DownloadOptions()))
    assert list(files) == ["index.html"]


def test_process_other_version_keeps_nothing():
    files = read_zip(process_swagger_ui(make_zip(MINIMAL_RELEASE), "v4.0.0", DownloadOptions()))
    assert files == {}


def test_process_with_default_templates():
    options = DownloadOptions(custom_css=DEFAULT_CSS, custom_initializer=DEFAULT_INITIALIZER)
    files = read_zip(process_swagger_ui(make_zip(FULL_RELEASE), "v5.0.0", options))
    assert files["custom-styles.css"] == DEFAULT_CSS
    assert files["swagger-initializer.js"] == DEFAULT_INITIALIZER
    assert "window.onload" in files["swagger-initializer.js"]


def test_process_invalid_zip():
    with pytest.raises(DownloadError):
        process_swagger_ui(b"not a zip", "v5.0.0", DownloadOptions())


def test_get_latest_version():
    body = json.dumps({"tag_name": "v5.17.14", "name": "Swagger UI v5.17.14"}).encode()
    with mock.patch("urllib.request.urlopen", return_value=FakeResponse(body)) as urlopen:
        assert get_latest_version() == "v5.17.14"
    request = urlopen.call_args.args[0]
    assert request.get_header("Accept") == "application/vnd.github.v3+json"
    assert request.get_header("User-agent") == "openapi-cli"


def test_get_latest_version_bad_status():
    with mock.patch("urllib.request.urlopen", return_value=FakeResponse(b"{}", status=204)):
        with pytest.raises(DownloadError, match="status 204"):
            get_latest_version()


def test_get_latest_version_http_error():
    error = urllib.error.HTTPError("http://localhost", 403, "Forbidden", None, None)
    with mock.patch("urllib.request.urlopen", side_effect=error):
        with pytest.raises(DownloadError, match="status 403"):
            get_latest_version()


def test_get_latest_version_bad_json():
    with mock.patch("urllib.request.urlopen", return_value=FakeResponse(b"not json")):
        with pytest.raises(DownloadError, match="failed to parse release info"):
            get_latest_version()


def test_release_from_json():
    release = GitHubRelease.from_json({"tag_name": "v1", "name": "n", "html_url": "http://localhost/r"})
    assert release == GitHubRelease("v1", "n", "http://localhost/r")


def test_download_with_version(tmp_path):
    archive = make_zip(MINIMAL_RELEASE)
    options = DownloadOptions(output_dir=str(tmp_path / "out"), version="5.0.0")
    with mock.patch("urllib.request.urlopen", return_value=FakeResponse(archive)) as urlopen:
        assert download(options) == "v5.0.0"
    assert urlopen.call_args.args[0].endswith("/v5.0.0.zip")
    saved = read_zip((tmp_path / "out" / "swagger-ui.zip").read_bytes())
    assert saved == {"index.html": "<html><head></head><body>Mock</body></html>"}


def test_download_latest(tmp_path):
    release = FakeResponse(json.dumps({"tag_name": "v5.0.0"}).encode())
    archive = FakeResponse(make_zip(MINIMAL_RELEASE))
    with mock.patch("urllib.request.urlopen", side_effect=[release, archive]):
        assert download(DownloadOptions(output_dir=str(tmp_path))) == "v5.0.0"
    assert (tmp_path / "swagger-ui.zip").is_file()


def test_download_failed_status(tmp_path):
    error = urllib.error.HTTPError("http://localhost", 404, "Not Found", None, None)
    with mock.patch("urllib.request.urlopen", side_effect=error):
        with pytest.raises(DownloadError, match="download failed with status 404"):
            download(DownloadOptions(output_dir=str(tmp_path), version="v0.0.0"))
    assert not (tmp_path / "swagger-ui.zip").exists()