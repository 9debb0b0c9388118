from .shell import WidgetShell, WIDGET_RENDERED, WIDGET_DISMISSED
from .news_widget import NewsWidget, build_news_widget

__all__ = ["WidgetShell", "WIDGET_RENDERED", "WIDGET_DISMISSED", "NewsWidget", "build_news_widget"]
