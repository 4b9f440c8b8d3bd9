"""Broadcaster for per-connection simulator messages."""

from __future__ import annotations

import logging

from pyview.live_socket import pub_sub_hub
from pyview.vendor.flet.pubsub import PubSub

from trainfresh.domain.contracts.session_broadcaster import SessionBroadcasterProtocol

logger = logging.getLogger(__name__)


class SessionBroadcaster(SessionBroadcasterProtocol):
    """Sends timer messages to a connection's topic via PubSub."""

    async def broadcast(self, topic: str, message: str) -> None:
        """Send a message to all subscribers on the topic.

        Args:
            topic: The pub/sub topic to broadcast to.
            message: Message name.
        """
        try:
            pubsub = PubSub(pub_sub_hub, topic)
            await pubsub.send_all_on_topic_async(topic, message)
            logger.debug(f"Broadcasted '{message}' to topic: {topic}")
        except Exception as e:
            logger.error(f"Failed to broadcast via pubsub: {e}", exc_info=True)
