"""
FastAPI integration.

The host application builds and seals its configuration at startup and
installs it on the app. Request handlers receive it explicitly through the
get_configuration dependency instead of reaching for a global.

Example:

    config = build_configuration([RainbowPlugin()], configure=configure_pageflow)
    app = FastAPI()
    install(app, config)

    @app.get("/editor/entries/{entry_id}", dependencies=[Depends(require_editor_host)])
    async def edit(entry_id: int, config: Configuration = Depends(get_configuration)):
        ...
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request, status

from pageflow.configuration import Configuration
from pageflow.exception_handlers import pageflow_exception_handler
from pageflow.exceptions import ConfigurationError, PageflowError

logger = logging.getLogger(__name__)

_STATE_KEY = "pageflow_config"


def install(app: FastAPI, config: Configuration) -> None:
    """Attach a sealed configuration to app and register error handlers."""
    if not config.sealed:
        raise ConfigurationError("Configuration must be sealed before it is installed")

    setattr(app.state, _STATE_KEY, config)
    app.add_exception_handler(PageflowError, pageflow_exception_handler)
    logger.info("Pageflow configuration installed")


def get_configuration(request: Request) -> Configuration:
    """FastAPI dependency returning the configuration installed on the app."""
    config = getattr(request.app.state, _STATE_KEY, None)
    if config is None:
        raise ConfigurationError("No Pageflow configuration installed on this application")
    return config


def require_editor_host(request: Request) -> None:
    """
    FastAPI dependency restricting editor endpoints.

    Responds with 404 if the configured editor routing constraint does not
    match the request, so editor routes look nonexistent on other hosts.
    """
    constraint = get_configuration(request).editor_routing_constraint
    if constraint is not None and not constraint(request):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
