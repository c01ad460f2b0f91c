"""
Dispatcher - routes a command or query through its validators to its handler.

Flow:
  send(request) → validators for type(request) → AppValidationError?
                                              ↓ (no failures)
                               handler for type(request) → result

The routing tables come from a PipelineConfig assembled once at startup
(see todo_service/setup/ioc/container.py). They are copied into read-only
mappings on construction, so one Dispatcher can serve concurrent calls.
"""

import asyncio
import time
from dataclasses import dataclass, field
from logging import getLogger
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Sequence

from todo_service.application.common.exceptions import (
    AppValidationError,
    HandlerNotRegisteredError,
)
from todo_service.application.common.interfaces import (
    Request,
    RequestHandler,
    Validator,
)

logger = getLogger(__name__)


@dataclass(frozen=True)
class PipelineConfig:
    """Explicit request-type → handler and request-type → validators tables."""

    handlers: Mapping[type, RequestHandler]
    validators: Mapping[type, Sequence[Validator]] = field(default_factory=dict)


class Dispatcher:
    def __init__(self, config: PipelineConfig, required: Iterable[type] = ()):
        self._handlers = MappingProxyType(dict(config.handlers))
        self._validators = MappingProxyType(
            {
                request_type: tuple(validators)
                for request_type, validators in config.validators.items()
            }
        )

        # Fail at startup, not on the first request
        for request_type in (*self._validators, *required):
            if request_type not in self._handlers:
                raise HandlerNotRegisteredError(request_type)

    def validate(self, request: Request) -> list[str]:
        """Run every validator registered for the request, in registration order."""
        failures: list[str] = []
        for validator in self._validators.get(type(request), ()):
            failures.extend(validator.validate(request))
        return failures

    async def send(self, request: Request, timeout: Optional[float] = None) -> Any:
        """
        Validate the request, then hand it to its handler.

        Args:
            request: Command or query instance
            timeout: Seconds left before the caller's deadline, if any

        Raises:
            AppValidationError: one or more validators failed; no handler ran
            HandlerNotRegisteredError: no handler for this request type
            asyncio.TimeoutError: the handler did not finish before the deadline
        """
        request_type = type(request)

        failures = self.validate(request)
        if failures:
            logger.info(
                f"Rejected {request_type.__name__}: {len(failures)} validation failure(s)"
            )
            raise AppValidationError(failures)

        handler = self._handlers.get(request_type)
        if handler is None:
            logger.error(f"No handler registered for {request_type.__name__}")
            raise HandlerNotRegisteredError(request_type)

        start_time = time.time()
        logger.debug(f"Dispatching {request_type.__name__} to {type(handler).__name__}")

        if timeout is None:
            result = await handler.execute(request)
        else:
            result = await asyncio.wait_for(handler.execute(request), timeout)

        logger.debug(
            f"Completed {request_type.__name__} in {time.time() - start_time:.3f}s"
        )
        return result
