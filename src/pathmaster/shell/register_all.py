"""
Register all available shell handlers.

Registration is explicit rather than a side effect of import. Call
register_all_handlers() at application startup.
"""

import logging

from pathmaster.shell.registry import HandlerRegistry, handler_registry

logger = logging.getLogger(__name__)


def register_all_handlers(registry: HandlerRegistry | None = None) -> HandlerRegistry:
    """
    Register every built-in shell handler.

    Handlers that are already registered are left in place, so calling this
    more than once is harmless.

    Args:
        registry: Registry to populate (default: the global handler_registry)

    Returns:
        The populated registry
    """
    from pathmaster.shell.bash import BashHandler
    from pathmaster.shell.fish import FishHandler
    from pathmaster.shell.generic import GenericHandler
    from pathmaster.shell.ksh import KshHandler
    from pathmaster.shell.zsh import ZshHandler

    if registry is None:
        registry = handler_registry

    for handler_cls in (GenericHandler, KshHandler, BashHandler, ZshHandler, FishHandler):
        handler = handler_cls()
        if handler.get_shell_type() in registry:
            continue
        registry.register(handler)

    logger.debug(f"Handler registration complete: {len(registry)} handler(s) available")
    return registry
