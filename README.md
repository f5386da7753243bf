# swaggerserve

Serve Swagger UI together with your OpenAPI specifications from any WSGI
server. You can also fetch a Swagger UI release and trim it into a
compact `swagger-ui.zip`.

## Installation

```
pip install swaggerserve
```

The package uses only the standard library.

## Preparing the Swagger UI bundle

`swaggerserve.download.download(options)` fetches a Swagger UI release
archive and keeps only the files under its `dist/` folder. It drops
`.map` files and `swagger-ui-es-*` bundles, and it strips
`//# sourceMappingURL=...` comments from `.js` and `.css` files. The
result is written as `swagger-ui.zip` in `options.output_dir`. If that
is empty, the current directory is used, and the directory is created
when missing. The function prints progress lines and returns the version
it saved, always with a leading `v`.

```python
from swaggerserve.download import DownloadOptions, download
from swaggerserve.templates import DEFAULT_CSS, DEFAULT_INITIALIZER

version = download(DownloadOptions(
    output_dir="static",
    custom_css=DEFAULT_CSS,
    custom_initializer=DEFAULT_INITIALIZER,
    version="5.17.14",   # leave empty to use the latest release
))
```

`DownloadOptions` has four fields, all empty strings by default:

- `output_dir`: where `swagger-ui.zip` is written.
- `custom_css`: when set, written into the bundle as
  `custom-styles.css`, with a `<link>` to it inserted before `</head>`
  in `index.html`.
- `custom_initializer`: when set, replaces the contents of
  `swagger-initializer.js`.
- `version`: the release to fetch. When empty, `get_latest_version()`
  is used.

`get_latest_version()` asks the GitHub releases API for the tag of the
latest Swagger UI release.

If you already have a release archive in memory, call
`process_swagger_ui(zip_data, version, options)`. It returns the trimmed
archive as bytes and does not use the network. The archive's files are
expected under `swagger-ui-<version without v>/dist/`.

A failed request, a status other than 200, an unreadable release
description, a malformed archive or a failed write raises
`DownloadError`.

## Serving it

`swaggerserve.handler.SwaggerHandler` is a WSGI application. Build it
from the bytes of `swagger-ui.zip` and a `Config`. Bytes that are not a
zip archive raise `zipfile.BadZipFile`.

```python
from pathlib import Path
from wsgiref.simple_server import make_server

from swaggerserve.handler import Config, SwaggerHandler

app = SwaggerHandler(
    Path("static/swagger-ui.zip").read_bytes(),
    Config(
        specs={
            "api": Path("openapi.yaml").read_bytes(),
            "admin": Path("admin.yaml").read_bytes(),
        },
        default_spec="api",
    ),
)

make_server("", 8080, app).serve_forever()
```

With the default configuration it serves these paths:

| Path                          | Content                                                  |
|-------------------------------|----------------------------------------------------------|
| `/swagger`                    | 301 redirect to `/swagger/`                              |
| `/swagger/...`                | files from the bundle (`index.html` for the root)        |
| `/openapi/specs?spec=<name>`  | the named spec as `application/yaml`                     |
| `/openapi/specs`              | `default_spec`, or else any one of the specs             |
| `/openapi/resources`          | JSON list of `{"name", "url"}`, one entry per spec       |

An unknown spec name, a missing bundle file and any other path return
404. Bundle files get a `Content-Type` from their extension (`.html`,
`.js`, `.css`, `.png`, `.svg`, `.json`). When no specs are configured,
the resources endpoint returns `null`. The handler's `resources`
attribute holds the same list as `Resource(name, url)` objects.

Set `base_path`, `spec_path` and `resources_path` in `Config` to change
these paths. Empty values fall back to the defaults above.

If your framework mounts the application under a prefix and strips that
prefix into `SCRIPT_NAME`, call `serve_ui`, `serve_spec` and
`serve_resources` directly. Each is itself a WSGI callable. At the mount
root, `serve_ui` redirects to the same URL with a trailing slash.
`routes()` returns a dict from path to callable. A key that ends in `/`
is meant as a prefix. Register these with your own router.

## Templates

`swaggerserve.templates` provides three ready-made strings:

- `DEFAULT_INITIALIZER` loads the spec list from `/openapi/resources`
  and sorts the `Authentication` tag first.
- `SIMPLE_INITIALIZER` loads a single spec from `/openapi/specs`.
- `DEFAULT_CSS` hides the Swagger branding.

## What it does not do

There is no command-line tool. Call `download` from Python to fetch a
bundle. The package has no HTTP server of its own. Run `SwaggerHandler`
under a WSGI server such as `wsgiref`. It does not read, validate or
generate OpenAPI documents: specs are served as the bytes you pass in.