"""Infrastructure API module."""
from .event_feed import WampEventFeed, subscribe_frame, subscription_topic
from .lcu_client import LCUClient

__all__ = [
    'LCUClient',
    'WampEventFeed',
    'subscribe_frame',
    'subscription_topic',
]
