import logging
import time
from typing import List, Optional, Tuple

from heelix.config import Settings
from heelix.feeds import EntityInfoFeed
from heelix.storage.models import NewsArticle, NewsDocument
from heelix.tracker import FeedList, FeedPoller
from heelix.utils.log_utils import configure_logging
from heelix.widget.shell import WIDGET_DISMISSED, WIDGET_RENDERED, WidgetShell

logger = logging.getLogger(__name__)


class NewsWidget:
    """Widget de últimas notícias: inicia o poller ao renderizar, para ao ser fechado."""

    def __init__(self, shell: WidgetShell, poller: FeedPoller):
        self.shell = shell
        self.poller = poller
        shell.on(WIDGET_RENDERED, self._on_rendered)
        shell.on(WIDGET_DISMISSED, self._on_dismissed)

    @property
    def feed_list(self) -> FeedList:
        return self.poller.feed_list

    @property
    def articles(self) -> Tuple[NewsArticle, ...]:
        return self.feed_list.snapshot()

    @property
    def documents(self) -> Tuple[NewsDocument, ...]:
        return tuple(a.document for a in self.articles)

    @property
    def information(self) -> List[NewsArticle]:
        return list(self.poller.last_batch)

    def _on_rendered(self, widget_id: str):
        logger.info("Starting news feed for %s", widget_id)
        self.poller.start()

    def _on_dismissed(self, widget_id: str):
        self.poller.stop()
        self.feed_list.clear()
        logger.info("News feed for %s torn down", widget_id)


def build_news_widget(settings: Settings, widget_id: Optional[str] = None, scheduler=None) -> NewsWidget:
    feed = EntityInfoFeed(settings.feed_url, batch_size=settings.feed_batch_size)
    feed_list = FeedList(max_items=settings.feed_max_items)
    poller = FeedPoller(
        feed,
        feed_list,
        interval_seconds=settings.poll_interval_seconds,
        keep_feed_order=settings.keep_feed_order,
        scheduler=scheduler,
    )
    return NewsWidget(WidgetShell(widget_id), poller)


def main():
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    widget = build_news_widget(settings)

    def log_headlines(snapshot):
        newest = snapshot[0].document.headline if snapshot else None
        logger.info("%d documents; newest: %s", len(snapshot), newest)

    widget.feed_list.subscribe(log_headlines)
    widget.shell.render()
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        pass
    finally:
        widget.shell.dismiss_widget()


if __name__ == "__main__":
    main()
