"""Logger - the public emission surface.

A Logger wraps exactly one sink. Leveled calls are filtered on the sink's
threshold before any formatting work happens, so disabled log statements
stay cheap. start_new_activity opens a live ActivityScope only when the
sink would record a START event; otherwise it returns the shared null
scope.

Usage:
    log = Logger(sink)
    with log.start_new_activity("Order {0}", order_id):
        log.log_info("reserving {0} items", count)
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import ParamSpec, TypeVar

from correlog.application.ports.build_identity import (
    UNKNOWN_VERSION,
    BuildIdentityProviderProtocol,
)
from correlog.application.ports.event_sink import EventSinkProtocol
from correlog.application.services.activity_scope import (
    NULL_SCOPE,
    ActivityScope,
    ActivityTracker,
)
from correlog.domain.errors.argument import InvalidArgumentError
from correlog.domain.value_objects.event_type import EventType

P = ParamSpec("P")
R = TypeVar("R")

BUILD_INFORMATION_TEMPLATE = "{0}, Version: {1}"


class SourceNameBuildIdentity(BuildIdentityProviderProtocol):
    """Build identity used when a Logger is given no provider.

    Reports the sink name as the build name and an unknown version.
    """

    def __init__(self, name: str) -> None:
        self._name = name

    def current_build_name(self) -> str:
        return self._name

    def current_build_version(self) -> str:
        return UNKNOWN_VERSION


class Logger:
    """Leveled, correlation-aware logger bound to one sink.

    The sink reference is fixed at construction; the Logger has no other
    mutable state. Sink write failures propagate unchanged.
    """

    def __init__(
        self,
        sink: EventSinkProtocol,
        build_identity: BuildIdentityProviderProtocol | None = None,
    ) -> None:
        """Initialize the logger.

        Args:
            sink: Sink every call writes to.
            build_identity: Provider used by log_build_information; defaults
                to the sink name with an unknown version.

        Raises:
            InvalidArgumentError: If sink is None.
        """
        if sink is None:
            raise InvalidArgumentError("sink")
        self._sink = sink
        self._build_identity = build_identity or SourceNameBuildIdentity(sink.name)

    @property
    def source(self) -> EventSinkProtocol:
        """The sink this logger writes to."""
        return self._sink

    @property
    def name(self) -> str:
        return self._sink.name

    def start_new_activity(self, activity_name: str, *args: object) -> ActivityTracker:
        """Begin a new activity if the sink would record it.

        Args:
            activity_name: Activity name, or a positional format template
                when args are given. The template is only formatted when a
                live scope is created. str.format output does not depend
                on the locale, except for the "n" presentation type.
            *args: Template arguments.

        Returns:
            A live ActivityScope, or the shared null scope when the sink's
            threshold excludes START events.

        Example:
            with log.start_new_activity("Sync {0}", account_id):
                ...
        """
        if not self._sink.should_record(EventType.START):
            return NULL_SCOPE
        if args:
            activity_name = activity_name.format(*args)
        return ActivityScope(self._sink, activity_name)

    def activity(
        self, activity_name: str | None = None
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """Decorator running the wrapped function inside a new activity.

        Args:
            activity_name: Activity name; defaults to the function's
                qualified name.
        """

        def decorator(func: Callable[P, R]) -> Callable[P, R]:
            name = activity_name or func.__qualname__

            @functools.wraps(func)
            def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
                with self.start_new_activity(name):
                    return func(*args, **kwargs)

            return wrapper

        return decorator

    def log_critical(self, message: str, *args: object) -> None:
        """Write a critical message."""
        self.log_message(EventType.CRITICAL, message, *args)

    def log_error(self, message: str, *args: object) -> None:
        """Write an error message."""
        self.log_message(EventType.ERROR, message, *args)

    def log_warning(self, message: str, *args: object) -> None:
        """Write a warning message."""
        self.log_message(EventType.WARNING, message, *args)

    def log_info(self, message: str, *args: object) -> None:
        """Write an informational message."""
        self.log_message(EventType.INFORMATION, message, *args)

    def log_verbose(self, message: str, *args: object) -> None:
        """Write a verbose message."""
        self.log_message(EventType.VERBOSE, message, *args)

    def log_message(self, event_type: EventType, message: str, *args: object) -> None:
        """Write a message of the given type if the sink admits it.

        Nothing is formatted or written when the type is filtered out.

        Args:
            event_type: Kind of event.
            message: Message text, or a positional format template when
                args are given, formatted as in start_new_activity.
            *args: Template arguments.
        """
        if self._sink.should_record(event_type):
            self._sink.emit(event_type, message, *args)

    def log_build_information(self) -> None:
        """Write one informational event naming the build and its version."""
        if not self._sink.should_record(EventType.INFORMATION):
            return
        self._sink.emit(
            EventType.INFORMATION,
            BUILD_INFORMATION_TEMPLATE,
            self._build_identity.current_build_name(),
            self._build_identity.current_build_version(),
        )

    def __repr__(self) -> str:
        return f"Logger(source={self._sink.name!r})"
