"""
Structured logging configuration for viclsm.

Provides:
- ComponentLogger: Structured logger with context binding
- get_logger: Get a logger for a specific component
- configure_logging: Configure logging output format

Kernels never log; the array wrappers in ``viclsm.process`` emit debug
events when they dispatch to a kernel. Events go to the stdlib
``viclsm`` logger, which stays silent until ``configure_logging`` is called.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Dict, Optional

import structlog

logging.getLogger("viclsm").addHandler(logging.NullHandler())


class ComponentLogger:
    """
    Structured logger for a named component.

    Example:
        log = ComponentLogger("soil")
        log = log.bind(n_fields=120)

        log.debug("soil_temperature_profile", n_nodes=3)
    """

    def __init__(
        self,
        component: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        self._component = component
        self._context = context or {}
        self._logger = structlog.wrap_logger(
            logging.getLogger(f"viclsm.{component}"),
            wrapper_class=structlog.stdlib.BoundLogger,
        )
        if context:
            self._logger = self._logger.bind(**context)

    @property
    def component(self) -> str:
        return self._component

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._context)

    def bind(self, **kwargs: Any) -> "ComponentLogger":
        """
        Create a new logger with additional context bindings.

        Args:
            **kwargs: Key-value pairs to bind to the logger

        Returns:
            New ComponentLogger with bound context
        """
        new_context = {**self._context, **kwargs}
        return ComponentLogger(self._component, new_context)

    def debug(self, event: str, **kwargs: Any) -> None:
        self._logger.debug(event, component=self._component, **kwargs)

    def info(self, event: str, **kwargs: Any) -> None:
        self._logger.info(event, component=self._component, **kwargs)


def get_logger(component: str) -> ComponentLogger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., "soil", "config")

    Returns:
        ComponentLogger instance
    """
    return ComponentLogger(component)


def configure_logging(
    level: str = "INFO",
    format: str = "console",
    output: str = "stderr",
) -> None:
    """
    Configure logging output.

    Args:
        level: Log level ("DEBUG", "INFO", "WARNING", "ERROR")
        format: Output format ("json" or "console")
        output: Output destination ("stderr", "stdout", or file path)

    Example:
        # JSON output for batch runs
        configure_logging(level="INFO", format="json")

        # Pretty console output for development
        configure_logging(level="DEBUG", format="console")
    """
    level_num = getattr(logging, level.upper(), logging.INFO)

    if output == "stderr":
        handler = logging.StreamHandler(sys.stderr)
    elif output == "stdout":
        handler = logging.StreamHandler(sys.stdout)
    else:
        handler = logging.FileHandler(output)

    if format == "console":
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
    else:
        handler.setFormatter(logging.Formatter("%(message)s"))

    root_logger = logging.getLogger("viclsm")
    root_logger.setLevel(level_num)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    if format == "json":
        processors = [
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
