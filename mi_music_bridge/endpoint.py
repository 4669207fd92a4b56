"""
UmengConfigEndpoint — native-side handler for the Umeng config channel.

Answers ``getUmengConfig`` with the bridge's ``CredentialPair`` and every
other method with ``notImplemented``.  Missing or broken config never turns
into an error result; it comes back as empty strings.
"""

import logging

from mi_music_bridge.bridge import PlatformBridge
from mi_music_bridge.channel import (
    ChannelRegistry,
    MethodCall,
    MethodChannel,
    MethodResult,
)
from mi_music_bridge.constants import CHANNEL_NAME, GET_UMENG_CONFIG

logger = logging.getLogger(__name__)


class UmengConfigEndpoint:
    """Binds a ``PlatformBridge`` to the ``cn.jokeo.mi_music/umeng_config`` channel."""

    channel_name = CHANNEL_NAME

    def __init__(self, bridge: PlatformBridge) -> None:
        self.bridge = bridge

    def register(self, registry: ChannelRegistry) -> MethodChannel:
        """Install this endpoint as the channel's handler.

        Must happen before the UI layer makes its first call.
        """
        channel = registry.channel(self.channel_name)
        channel.set_method_call_handler(self.handle)
        logger.info(
            f"Umeng config endpoint registered on {self.channel_name} "
            f"(platform={self.bridge.capabilities().platform})"
        )
        return channel

    def handle(self, call: MethodCall) -> MethodResult:
        if call.method == GET_UMENG_CONFIG:
            pair = self.bridge.get_umeng_config()
            logger.debug(
                f"{GET_UMENG_CONFIG}: appKey configured={bool(pair.appKey)}, "
                f"channel configured={bool(pair.channel)}"
            )
            return MethodResult.success(pair.to_payload())

        logger.warning(f"Unsupported method on {self.channel_name}: {call.method}")
        return MethodResult.not_implemented()
