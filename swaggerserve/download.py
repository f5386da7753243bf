"""Fetching a Swagger UI release and repackaging its dist folder."""

from __future__ import annotations

import io
import json
import re
import urllib.error
import urllib.request
import zipfile
from dataclasses import dataclass
from pathlib import Path

GITHUB_RELEASES_API = "https://api.github.com/repos/swagger-api/swagger-ui/releases/latest"
DOWNLOAD_URL_TEMPLATE = "https://github.com/swagger-api/swagger-ui/archive/refs/tags/{}.zip"
USER_AGENT = "openapi-cli"
OUTPUT_NAME = "swagger-ui.zip"
CUSTOM_CSS_NAME = "custom-styles.css"

_SOURCE_MAPPING = re.compile(rb"//# sourceMappingURL=.*")
_CSS_LINK = f'<link rel="stylesheet" type="text/css" href="{CUSTOM_CSS_NAME}">'


class DownloadError(Exception):
    """Raised when a release cannot be fetched, processed or saved."""


@dataclass(frozen=True)
class GitHubRelease:
    """The fields of a release description that are used here."""

    tag_name: str = ""
    name: str = ""
    html_url: str = ""

    @classmethod
    def from_json(cls, data: object) -> GitHubRelease:
        if not isinstance(data, dict):
            raise DownloadError("failed to parse release info: expected a JSON object")
        return cls(
            tag_name=str(data.get("tag_name") or ""),
            name=str(data.get("name") or ""),
            html_url=str(data.get("html_url") or ""),
        )


@dataclass
class DownloadOptions:
    """How a Swagger UI release is downloaded and customised."""

    output_dir: str = ""
    custom_css: str = ""
    custom_initializer: str = ""
    version: str = ""


def _fetch(request: urllib.request.Request | str, failure: str, bad_status: str) -> bytes:
    try:
        with urllib.request.urlopen(request) as response:
            status = response.status
            body = response.read()
    except urllib.error.HTTPError as exc:
        raise DownloadError(bad_status.format(exc.code)) from exc
    except OSError as exc:
        raise DownloadError(f"{failure}: {exc}") from exc
    if status != 200:
        raise DownloadError(bad_status.format(status))
    return body


def get_latest_version() -> str:
    """Return the tag of the latest Swagger UI release."""
    request = urllib.request.Request(
        GITHUB_RELEASES_API,
        headers={"Accept": "application/vnd.github.v3+json", "User-Agent": USER_AGENT},
    )
    body = _fetch(request, "failed to fetch releases", "GitHub API returned status {}")
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise DownloadError(f"failed to parse release info: {exc}") from exc
    return GitHubRelease.from_json(data).tag_name


def download(options: DownloadOptions) -> str:
    """Download, customise and save Swagger UI; return the version saved."""
    version = options.version
    if not version:
        try:
            version = get_latest_version()
        except DownloadError as exc:
            raise DownloadError(f"failed to get latest version: {exc}") from exc

    if not version.startswith("v"):
        version = "v" + version

    url = DOWNLOAD_URL_TEMPLATE.format(version)
    print(f"Downloading Swagger UI {version} from {url}")

    archive = _fetch(url, "failed to download", "download failed with status {}")

    try:
        processed = process_swagger_ui(archive, version, options)
    except DownloadError as exc:
        raise DownloadError(f"failed to process swagger-ui: {exc}") from exc

    output_dir = Path(options.output_dir or ".")
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DownloadError(f"failed to create output directory: {exc}") from exc

    output_path = output_dir / OUTPUT_NAME
    try:
        output_path.write_bytes(processed)
    except OSError as exc:
        raise DownloadError(f"failed to write output: {exc}") from exc

    print(f"Swagger UI {version} saved to {output_path}")
    return version


def _customise(relative_path: str, content: bytes, options: DownloadOptions) -> bytes:
    if relative_path.endswith((".js", ".css")):
        content = _SOURCE_MAPPING.sub(b"", content)
    if relative_path == "swagger-initializer.js" and options.custom_initializer:
        content = options.custom_initializer.encode()
    if relative_path == "index.html" and options.custom_css:
        html = content.decode("utf-8", errors="surrogateescape")
        html = html.replace("</head>", _CSS_LINK + "\n</head>", 1)
        content = html.encode("utf-8", errors="surrogateescape")
    return content


def process_swagger_ui(zip_data: bytes, version: str, options: DownloadOptions) -> bytes:
    """Keep the release's dist folder, apply customisations and return a new zip."""
    dist_prefix = f"swagger-ui-{version.removeprefix('v')}/dist/"
    output = io.BytesIO()
    try:
        with zipfile.ZipFile(io.BytesIO(zip_data)) as source, zipfile.ZipFile(
            output, "w", zipfile.ZIP_DEFLATED
        ) as target:
            for info in source.infolist():
                name = info.filename
                if not name.startswith(dist_prefix):
                    continue
                if name.endswith(".map") or "swagger-ui-es-" in name:
                    continue
                relative_path = name[len(dist_prefix):]
                if not relative_path:
                    continue
                content = _customise(relative_path, source.read(info), options)
                target.writestr(relative_path, content)

            if options.custom_css:
                target.writestr(CUSTOM_CSS_NAME, options.custom_css.encode())
    except zipfile.BadZipFile as exc:
        raise DownloadError(str(exc)) from exc
    return output.getvalue()