"""
Web front end.

    GET  /          landing page (templates/template.html)
    POST /swim      form fields `query` and `filter`; HTML result page, or the
                    plain-text table when the client asks for text/plain
    GET  /assets/*  static files
    GET  /health    liveness check

Errors never take the server down: they are answered with 400 (bad date
phrase) or 500 (upstream trouble) and a short message.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

import requests
import uvicorn
from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from swimtimes import __version__
from swimtimes.config import AppConfig, load_config
from swimtimes.errors import SwimTimesError
from swimtimes.logging_config import setup_logging
from swimtimes.pipeline import find_swims
from swimtimes.render import render_table


logger = logging.getLogger(__name__)

INDEX_TEMPLATE = "template.html"
RESULT_TEMPLATE = "result.html"


class HealthStatus(BaseModel):
    status: str
    version: str


def _wants_text(request: Request) -> bool:
    accept = request.headers.get("accept", "")
    return "text/plain" in accept and "text/html" not in accept


def create_app(
    config: AppConfig,
    *,
    session: requests.Session | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> FastAPI:
    """
    Build the FastAPI application for `config`.

    `session` and `clock` exist for tests; by default every request makes a
    fresh upstream call and uses the current local time.
    """
    app = FastAPI(title="Swim Times")
    templates = Jinja2Templates(directory=str(config.template_dir))

    @app.exception_handler(SwimTimesError)
    async def handle_swim_error(request: Request, exc: SwimTimesError) -> PlainTextResponse:
        if exc.http_status >= 500:
            logger.error("Lookup failed: %s", exc)
        else:
            logger.info("Rejected request: %s", exc)
        return PlainTextResponse(str(exc), status_code=exc.http_status)

    @app.get("/health")
    async def health_check() -> HealthStatus:
        """Return health status of the server."""
        return HealthStatus(status="healthy", version=__version__)

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request) -> Response:
        return templates.TemplateResponse(request, INDEX_TEMPLATE)

    @app.post("/swim")
    def swim(request: Request, query: str = Form(""), filter_name: str = Form("", alias="filter")) -> Response:
        window, entries = find_swims(
            query,
            filter_name,
            venue_name=config.center,
            api_url=config.api_url,
            now=clock(),
            session=session,
        )
        if _wants_text(request):
            return PlainTextResponse(render_table(window.start, entries))
        return templates.TemplateResponse(
            request,
            RESULT_TEMPLATE,
            {"stamp": window.start, "results": entries},
        )

    app.mount("/assets", StaticFiles(directory=str(config.assets_dir), check_dir=False), name="assets")
    return app


# ---------------------------------------------------------------------------
# Server entry
# ---------------------------------------------------------------------------


def build_parser(config: AppConfig | None = None) -> argparse.ArgumentParser:
    config = config or AppConfig()
    p = argparse.ArgumentParser(prog="swimtimes-web", description="Serve swimming times over HTTP")
    p.add_argument("--host", type=str, default=config.host, help="Listen address")
    p.add_argument("--port", type=int, default=config.port, help="Listen port")
    p.add_argument("--center", "-c", type=str, default=config.center, help="Name of the center")
    p.add_argument("--templates", type=Path, default=config.template_dir, help="Template directory")
    p.add_argument("--assets", type=Path, default=config.assets_dir, help="Static asset directory")
    return p


def main(argv: list[str] | None = None) -> None:
    config = load_config()
    args = build_parser(config).parse_args(argv)
    config = dataclasses.replace(
        config,
        host=args.host,
        port=args.port,
        center=args.center,
        template_dir=args.templates,
        assets_dir=args.assets,
    )

    setup_logging(config.log_level)
    logger.info("Starting server on %s:%d for %s", config.host, config.port, config.center)
    uvicorn.run(create_app(config), host=config.host, port=config.port)


if __name__ == "__main__":
    main()
