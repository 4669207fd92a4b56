"""
Named method channels between the UI layer and native platform code.

A ``MethodChannel`` carries one request (``MethodCall``) and one reply
(``MethodResult``) per invocation.  The native side registers a single
handler per channel; the handler answers with one of three outcomes:

- ``success`` — the method ran and produced a value
- ``error`` — the method ran and failed
- ``notImplemented`` — the channel has no such method

Channels are looked up by name through a ``ChannelRegistry``, which is what
the HTTP layer dispatches into.

Usage::

    registry = ChannelRegistry()
    channel = registry.channel("cn.jokeo.mi_music/umeng_config")
    channel.set_method_call_handler(lambda call: MethodResult.success({}))
    channel.invoke_method("getUmengConfig")
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

SUCCESS = "success"
ERROR = "error"
NOT_IMPLEMENTED = "notImplemented"


@dataclass(frozen=True)
class MethodCall:
    """A single request on a channel."""

    method: str
    arguments: Any = None


@dataclass(frozen=True)
class MethodResult:
    """The reply to a ``MethodCall``.

    Build instances with ``success()``, ``error()`` or ``not_implemented()``
    rather than the constructor.
    """

    status: str
    value: Any = None
    code: Optional[str] = None
    message: Optional[str] = None
    details: Any = None

    @classmethod
    def success(cls, value: Any = None) -> "MethodResult":
        return cls(status=SUCCESS, value=value)

    @classmethod
    def error(
        cls, code: str, message: Optional[str] = None, details: Any = None
    ) -> "MethodResult":
        return cls(status=ERROR, code=code, message=message, details=details)

    @classmethod
    def not_implemented(cls) -> "MethodResult":
        return cls(status=NOT_IMPLEMENTED)

    @property
    def is_success(self) -> bool:
        return self.status == SUCCESS

    @property
    def is_not_implemented(self) -> bool:
        return self.status == NOT_IMPLEMENTED


MethodCallHandler = Callable[[MethodCall], MethodResult]


class MethodChannel:
    """A named channel with at most one native-side handler."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._handler: Optional[MethodCallHandler] = None

    @property
    def has_handler(self) -> bool:
        return self._handler is not None

    def set_method_call_handler(self, handler: Optional[MethodCallHandler]) -> None:
        """Register ``handler`` for this channel, replacing any previous one.

        Passing ``None`` unregisters the current handler.
        """
        self._handler = handler
        if handler is None:
            logger.info(f"Handler cleared for channel {self.name}")
        else:
            logger.info(f"Handler registered for channel {self.name}")

    def invoke_method(self, method: str, arguments: Any = None) -> MethodResult:
        """Dispatch a call to the registered handler and return its reply.

        A channel without a handler answers ``notImplemented``.  A handler
        that raises is reported as an ``error`` result.
        """
        call = MethodCall(method=method, arguments=arguments)
        if self._handler is None:
            logger.warning(f"No handler on channel {self.name} for {method}")
            return MethodResult.not_implemented()

        try:
            return self._handler(call)
        except Exception as e:
            logger.error(
                f"Handler for {self.name}#{method} failed: {e}", exc_info=True
            )
            return MethodResult.error("error", str(e))


class ChannelRegistry:
    """Name -> ``MethodChannel`` lookup for one host process."""

    def __init__(self) -> None:
        self._channels: Dict[str, MethodChannel] = {}

    def channel(self, name: str) -> MethodChannel:
        """Return the channel called ``name``, creating it on first use."""
        if name not in self._channels:
            self._channels[name] = MethodChannel(name)
        return self._channels[name]

    def get(self, name: str) -> Optional[MethodChannel]:
        """Return the channel called ``name``, or ``None`` if never created."""
        return self._channels.get(name)

    def names(self) -> list[str]:
        return sorted(self._channels)
