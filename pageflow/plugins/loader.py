"""
Plugin Loader

Builds the engine configuration at application startup: plugins configure
first, in the order given, then the host application's callback runs so it
can override replaceable registrations (themes, quotas) and settings.
Finally the configuration is sealed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from pageflow.configuration import Configuration
from pageflow.plugins.base import Plugin
from pageflow.registry import DuplicatePolicy, Registry
from pageflow.settings import PageflowSettings

logger = logging.getLogger(__name__)


def build_configuration(
    plugins: Iterable[Plugin] = (),
    *,
    settings: PageflowSettings | None = None,
    configure: Callable[[Configuration], None] | None = None,
) -> Configuration:
    """
    Create, populate and seal a Configuration.

    Raises:
        DuplicateRegistrationError: Two plugins share a name, or a plugin
            registers an entry another plugin already registered in a
            registry that rejects duplicates.
    """
    registered: Registry[Plugin] = Registry("plugin", policy=DuplicatePolicy.REJECT)
    for plugin in plugins:
        registered.register(plugin.meta.name, plugin)

    config = Configuration(settings)

    for plugin in registered:
        plugin.configure(config)
        logger.info(
            "Plugin configured: %s v%s", plugin.meta.name, plugin.meta.version, extra={"plugin": plugin.meta.name}
        )

    if configure is not None:
        configure(config)

    config.seal()
    logger.info("Pageflow configuration complete — %d plugins loaded", len(registered))
    return config
