"""structlog setup for the friendgraph CLI.

Modules log through ``logging.getLogger(__name__)``; structlog renders those
records on stderr, as console lines or as JSON with ``--log-json``. Records
carry the working network file (``network``) once it is opened, and the
service operation (``op``) while a service call runs.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from pathlib import Path

# Name of the stderr handler we own on the root logger.
_HANDLER_NAME = "friendgraph"


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route logs to stderr and start a fresh log context.

    ``friendgraph.*`` loggers emit DEBUG with *verbose*, WARNING otherwise;
    third-party loggers stay at WARNING. Calling this again replaces the
    handler installed by the previous call and leaves other handlers alone.
    """
    structlog.contextvars.clear_contextvars()

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    renderer: structlog.types.Processor
    if log_json:
        pre_chain.append(structlog.processors.TimeStamper(fmt="iso", utc=True))
        renderer = structlog.processors.JSONRenderer()
    else:
        pre_chain.append(structlog.processors.TimeStamper(fmt="%H:%M:%S", utc=False))
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    for old in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("friendgraph").setLevel(logging.DEBUG if verbose else logging.WARNING)


def bind_network(path: Path) -> None:
    """Tag every following record with the working network file name."""
    structlog.contextvars.bind_contextvars(network=path.name)
