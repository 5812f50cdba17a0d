"""A fallback server for Firefly Garden.

If the ``--fallback`` option is given when ``firefly-garden-server`` is run,
we will still start an HTTP server even if the counter service cannot be
set up. This means that something will still be viewable at the expected
URL, which is helpful if the service is running unattended.
"""

import json
from html import escape
from traceback import format_exception
from typing import Any
from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from starlette.responses import RedirectResponse


class FallbackApp(FastAPI):
    """A basic FastAPI application to serve an error page."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        r"""Set up a simple error server.

        This app is used to display a single page, which explains why the
        counter service cannot start.

        :param \*args: is passed to `fastapi.FastAPI.__init__`\ .
        :param \**kwargs: is passed to `fastapi.FastAPI.__init__`\ .
        """
        super().__init__(*args, **kwargs)
        self.garden_config = None
        self.garden_server = None
        self.garden_error = None
        self.html_code = 500


app = FallbackApp()

ERROR_PAGE = """
<!DOCTYPE html>
<html>
<head lang="en">
    <title>Firefly Garden</title>
    <style>
    pre {
        white-space: pre-wrap;
        overflow-wrap: anywhere;
    }
    </style>
</head>
<body>
    <h1>Firefly Garden Couldn't Start</h1>
    <p>Something went wrong when setting up the counter service.</p>
    <p>Please check your configuration and try again.</p>
    <p>More details may be shown below:</p>
    <pre>{{error}}</pre>
    {{counter}}
    <p>Your configuration:</p>
    <pre>{{config}}</pre>
    <p>Traceback</p>
    <pre>{{traceback}}</pre>
</body>
</html>
"""


@app.get("/")
async def root() -> HTMLResponse:
    """Display the error page.

    :return: a response that serves the error as an HTML page.
    """
    error_message = f"{app.garden_error}"
    error_w_trace = ""
    if app.garden_error is not None:
        error_w_trace = "".join(format_exception(app.garden_error))
    if app.garden_server is None:
        counter = "<p>The counter service was not created.</p>"
    else:
        count = app.garden_server.counter.count
        counter = f"<p>The counter service was created, with {count} fireflies.</p>"
    config = app.garden_config
    if hasattr(config, "model_dump"):
        config = config.model_dump()
    config_json = json.dumps(config, indent=2)

    content = ERROR_PAGE
    content = content.replace("{{error}}", escape(error_message, quote=False))
    content = content.replace("{{counter}}", counter)
    content = content.replace("{{config}}", escape(config_json, quote=False))
    content = content.replace("{{traceback}}", escape(error_w_trace, quote=False))
    return HTMLResponse(content=content, status_code=app.html_code)


@app.get("/{path:path}")
async def redirect_to_root(path: str) -> RedirectResponse:
    """Redirect all paths on the server to the error page.

    :param path: The path requested.

    :return: a response redirecting to the error page.
    """
    return RedirectResponse(url="/")
