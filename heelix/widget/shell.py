import logging
import uuid
from typing import Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

WIDGET_RENDERED = "widget:rendered"
WIDGET_DISMISSED = "widget:dismissed"

WidgetListener = Callable[[str], None]


class WidgetShell:
    """
    Casca genérica compartilhada por todos os widgets.

    Emite `widget:rendered` ao montar e `widget:dismissed` quando o fechamento é
    pedido; ambos levam o id do widget. Widgets concretos se penduram nesses
    eventos para iniciar e encerrar o próprio trabalho.
    """

    def __init__(self, widget_id: Optional[str] = None):
        self.widget_id: str = widget_id or f"widget-{uuid.uuid4().hex[:8]}"
        self._listeners: Dict[str, List[WidgetListener]] = {}

    def on(self, event: str, listener: WidgetListener):
        self._listeners.setdefault(event, []).append(listener)

    def broadcast(self, event: str):
        for listener in list(self._listeners.get(event, [])):
            listener(self.widget_id)

    def render(self):
        self.broadcast(WIDGET_RENDERED)
        logger.info("Widget rendered: %s", self.widget_id)

    def dismiss_widget(self):
        self.broadcast(WIDGET_DISMISSED)
        logger.info("Widget dismissed: %s", self.widget_id)

    def show_widget_menu(self):
        logger.info("Widget menu functionality is stubbed for %s", self.widget_id)
