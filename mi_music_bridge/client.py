"""
UI-side client for bridge channels served by ``create_bridge_app()``.

``ChannelClient.invoke_method`` mirrors the native reply as Python outcomes:

- success → the result value is returned
- not implemented → ``MissingPluginError``
- handler error → ``ChannelCallError``

Usage::

    client = UmengConfigClient("http://127.0.0.1:8000")
    pair = await client.get_umeng_config()
    if pair.appKey:
        init_analytics(pair.appKey, pair.channel)
"""

import logging
from typing import Any, Optional

import aiohttp

from mi_music_bridge.constants import CHANNEL_NAME, GET_UMENG_CONFIG
from mi_music_bridge.platform.credentials import CredentialPair

logger = logging.getLogger(__name__)


class ChannelError(Exception):
    """Base class for failed channel calls."""


class MissingPluginError(ChannelError):
    """The native side has no implementation for the requested method."""

    def __init__(self, channel: str, method: str):
        super().__init__(f"No implementation found for method {method} on channel {channel}")
        self.channel = channel
        self.method = method


class ChannelCallError(ChannelError):
    """The native handler ran and reported an error."""

    def __init__(self, code: str, message: Optional[str] = None, details: Any = None):
        super().__init__(f"{code}: {message}" if message else code)
        self.code = code
        self.message = message
        self.details = details


class ChannelClient:
    """Invokes methods on one named channel over HTTP."""

    def __init__(self, base_url: str, channel: str, *, timeout: float = 10) -> None:
        self.base_url = base_url.rstrip("/")
        self.channel = channel
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{self.base_url}/channels/{self.channel}"

    async def invoke_method(self, method: str, arguments: Any = None) -> Any:
        payload = {"method": method, "arguments": arguments}

        async with aiohttp.ClientSession() as session:
            async with session.post(
                self.url,
                json=payload,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as resp:
                if resp.status == 501:
                    raise MissingPluginError(self.channel, method)

                if resp.status == 500:
                    try:
                        data = await resp.json()
                    except (aiohttp.ContentTypeError, ValueError):
                        raise ChannelCallError("error", await resp.text()) from None
                    if not isinstance(data, dict):
                        raise ChannelCallError("error", str(data))
                    raise ChannelCallError(
                        data.get("code") or "error",
                        data.get("message"),
                        data.get("details"),
                    )

                if resp.status != 200:
                    text = await resp.text()
                    raise ChannelError(
                        f"{self.channel}#{method} failed with status {resp.status}: "
                        f"{text[:200]}"
                    )

                data = await resp.json()
                return data.get("result")


class UmengConfigClient(ChannelClient):
    """Typed client for the ``cn.jokeo.mi_music/umeng_config`` channel."""

    def __init__(self, base_url: str, *, timeout: float = 10) -> None:
        super().__init__(base_url, CHANNEL_NAME, timeout=timeout)

    async def get_umeng_config(self) -> CredentialPair:
        result = await self.invoke_method(GET_UMENG_CONFIG)
        pair = CredentialPair(**(result or {}))
        logger.debug(f"Umeng config received: appKey configured={bool(pair.appKey)}")
        return pair
