"""Log output for the famgrid modules.

store, graph and layout write through stdlib loggers under ``famgrid.*``:
slot reuse and removal, relate/detach calls, and a summary line per layout
pass. Those are DEBUG records, so they only show up with ``verbose``.
structlog renders them either for a terminal or as JSON lines on stderr.
"""

import logging
import sys

import structlog


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Send ``famgrid.*`` records to stderr through structlog.

    Args:
        verbose: Show store/graph/layout DEBUG records. Otherwise WARNING+.
        log_json: One JSON object per record instead of console text.
    """
    # famgrid only logs through stdlib loggers, so these run as the
    # formatter's pre-chain for every record
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    # Replace, never stack, so main() can be called more than once
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("famgrid").setLevel(logging.DEBUG if verbose else logging.WARNING)
    # matplotlib's font manager is chatty at DEBUG
    logging.getLogger("matplotlib").setLevel(logging.WARNING)
