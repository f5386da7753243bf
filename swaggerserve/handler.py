"""WSGI application serving Swagger UI and OpenAPI specifications."""

from __future__ import annotations

import html
import io
import json
import posixpath
import zipfile
from dataclasses import asdict, dataclass, field, replace
from http import HTTPStatus
from typing import Callable, Iterable
from urllib.parse import parse_qs, quote

CONTENT_TYPES = {
    ".html": "text/html; charset=utf-8",
    ".js": "application/javascript",
    ".css": "text/css",
    ".png": "image/png",
    ".svg": "image/svg+xml",
    ".json": "application/json",
}


@dataclass(frozen=True)
class Resource:
    """A named spec URL shown in the Swagger UI dropdown."""

    name: str
    url: str


@dataclass
class Config:
    """Where the UI, the specs and the resource list are served."""

    base_path: str = ""
    spec_path: str = ""
    resources_path: str = ""
    specs: dict[str, bytes] = field(default_factory=dict)
    default_spec: str = ""


def _respond(
    start_response: Callable,
    status: HTTPStatus,
    body: bytes = b"",
    content_type: str | None = None,
    extra_headers: Iterable[tuple[str, str]] = (),
) -> list[bytes]:
    headers = []
    if content_type:
        headers.append(("Content-Type", content_type))
    headers.extend(extra_headers)
    headers.append(("Content-Length", str(len(body))))
    start_response(f"{status.value} {status.phrase}", headers)
    return [body]


def _redirect(start_response: Callable, location: str) -> list[bytes]:
    status = HTTPStatus.MOVED_PERMANENTLY
    body = f'<a href="{html.escape(location)}">{status.phrase}</a>.\n\n'.encode()
    return _respond(
        start_response, status, body, "text/html; charset=utf-8", [("Location", location)]
    )


def _not_found(start_response: Callable) -> list[bytes]:
    return _respond(
        start_response,
        HTTPStatus.NOT_FOUND,
        b"404 page not found\n",
        "text/plain; charset=utf-8",
        [("X-Content-Type-Options", "nosniff")],
    )


class SwaggerHandler:
    """Serves the files of a Swagger UI zip along with the configured specs."""

    def __init__(self, swagger_ui_zip: bytes, config: Config) -> None:
        self.config = replace(
            config,
            base_path=config.base_path or "/swagger",
            spec_path=config.spec_path or "/openapi/specs",
            resources_path=config.resources_path or "/openapi/resources",
            specs=dict(config.specs),
        )
        with zipfile.ZipFile(io.BytesIO(swagger_ui_zip)) as archive:
            self._files = {
                info.filename: archive.read(info)
                for info in archive.infolist()
                if not info.is_dir()
            }
        self.resources = [
            Resource(name, f"{self.config.spec_path}?spec={name}") for name in self.config.specs
        ]
        payload = [asdict(resource) for resource in self.resources] or None
        self._resources_json = json.dumps(payload, separators=(",", ":")).encode()

    def __call__(self, environ: dict, start_response: Callable) -> list[bytes]:
        path = environ.get("PATH_INFO", "")
        base = self.config.base_path
        if path == base:
            return _redirect(start_response, base + "/")
        if path.startswith(base + "/"):
            return self._serve_swagger_ui(path, start_response)
        if path == self.config.spec_path:
            return self.serve_spec(environ, start_response)
        if path == self.config.resources_path:
            return self.serve_resources(environ, start_response)
        return _not_found(start_response)

    def serve_ui(self, environ: dict, start_response: Callable) -> list[bytes]:
        """Serve UI files when the mount point is already stripped into SCRIPT_NAME."""
        path = environ.get("PATH_INFO", "")
        if path in ("", "/"):
            request_uri = self._request_uri(environ)
            if not request_uri.endswith("/"):
                return _redirect(start_response, request_uri + "/")
        return self._serve_file(path.removeprefix("/") or "index.html", start_response)

    def serve_spec(self, environ: dict, start_response: Callable) -> list[bytes]:
        """Serve the spec named by the ``spec`` query parameter, or the default one."""
        query = parse_qs(environ.get("QUERY_STRING", ""), keep_blank_values=True)
        spec_name = query.get("spec", [""])[0] or self.config.default_spec

        spec = self.config.specs.get(spec_name)
        if spec is None:
            if self.config.specs and not spec_name:
                spec = next(iter(self.config.specs.values()))
            else:
                return _not_found(start_response)
        return _respond(start_response, HTTPStatus.OK, spec, "application/yaml")

    def serve_resources(self, environ: dict, start_response: Callable) -> list[bytes]:
        """Serve the JSON list of available specs."""
        return _respond(start_response, HTTPStatus.OK, self._resources_json, "application/json")

    def routes(self) -> dict[str, Callable]:
        """Return route patterns and their applications; a trailing slash marks a prefix."""
        return {
            self.config.base_path + "/": self,
            self.config.spec_path: self.serve_spec,
            self.config.resources_path: self.serve_resources,
        }

    @staticmethod
    def _request_uri(environ: dict) -> str:
        uri = environ.get("REQUEST_URI")
        if uri:
            return uri
        uri = quote(environ.get("SCRIPT_NAME", "") + environ.get("PATH_INFO", ""), safe="/")
        query = environ.get("QUERY_STRING", "")
        return f"{uri}?{query}" if query else uri

    def _serve_swagger_ui(self, path: str, start_response: Callable) -> list[bytes]:
        file_path = path.removeprefix(self.config.base_path).removeprefix("/")
        return self._serve_file(file_path or "index.html", start_response)

    def _serve_file(self, file_path: str, start_response: Callable) -> list[bytes]:
        content = self._files.get(file_path)
        if content is None:
            return _respond(start_response, HTTPStatus.NOT_FOUND)
        content_type = CONTENT_TYPES.get(posixpath.splitext(file_path)[1])
        return _respond(start_response, HTTPStatus.OK, content, content_type)