"""Ready-made initializer scripts and stylesheet for the bundled Swagger UI."""

DEFAULT_INITIALIZER = """\
window.onload = () => {
  // Tags are sorted by name, except that "Authentication" always comes first.
  const authenticationFirst = (left, right) => {
    if (left === "Authentication") {
      return -1;
    }
    if (right === "Authentication") {
      return 1;
    }
    return left.localeCompare(right);
  };

  const createUI = (origin, specList) =>
    SwaggerUIBundle({
      dom_id: "#swagger-ui",
      url: origin + "/openapi/specs",
      urls: specList && specList.length > 0 ? specList : undefined,
      presets: [SwaggerUIBundle.presets.apis, SwaggerUIStandalonePreset],
      plugins: [SwaggerUIBundle.plugins.DownloadUrl],
      layout: "StandaloneLayout",
      docExpansion: "none",
      deepLinking: true,
      tagsSorter: authenticationFirst,
      operationsSorter: "alpha",
    });

  const resolveOrigin = () => {
    const found = window.location.search.match(/url=([^&]+)/);
    return found && found.length > 1
      ? decodeURIComponent(found[1])
      : window.location.origin;
  };

  const start = async (origin) => {
    try {
      const reply = await fetch("/openapi/resources", {
        credentials: "same-origin",
        headers: {
          "Accept": "application/json",
          "Content-Type": "application/json",
        },
      });
      const specList = await reply.json();
      window.ui = createUI(origin, specList);
    } catch (problem) {
      console.error("Error loading Swagger UI: ", problem);
    }
  };

  start(resolveOrigin());
};
"""
"""Initializer that loads every spec listed by the resources endpoint."""

DEFAULT_CSS = """\
.swagger-ui .info .main > a,
.swagger-ui .info .title > span {
  display: none;
}
"""
"""Stylesheet that hides the Swagger branding."""

SIMPLE_INITIALIZER = """\
window.onload = () => {
  window.ui = SwaggerUIBundle({
    dom_id: "#swagger-ui",
    url: "/openapi/specs",
    presets: [SwaggerUIBundle.presets.apis, SwaggerUIStandalonePreset],
    plugins: [SwaggerUIBundle.plugins.DownloadUrl],
    layout: "StandaloneLayout",
    docExpansion: "none",
    deepLinking: true,
    tagsSorter: "alpha",
    operationsSorter: "alpha",
  });
};
"""
"""Initializer for a single spec served at /openapi/specs."""