from .feed_list import FeedList
from .poller import FeedPoller, PollerState

__all__ = ["FeedList", "FeedPoller", "PollerState"]
