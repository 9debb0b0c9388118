import logging
from enum import Enum
from threading import RLock
from typing import List

from apscheduler.schedulers.background import BackgroundScheduler

from heelix.feeds.base import BaseFeed
from heelix.storage.models import NewsArticle
from heelix.tracker.feed_list import FeedList

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 10


class PollerState(str, Enum):
    idle = "idle"
    polling = "polling"
    stopped = "stopped"


class FeedPoller:
    """
    Mantém uma FeedList atualizada buscando o feed periodicamente.

    `start()` faz uma busca imediata e agenda as seguintes a cada `interval_seconds`.
    `stop()` cancela o job; depois disso o poller não pode ser reiniciado.
    """

    JOB_ID = "poll_feed"

    def __init__(
        self,
        feed: BaseFeed,
        feed_list: FeedList,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        keep_feed_order: bool = False,
        scheduler=None,
    ):
        self.feed = feed
        self.feed_list = feed_list
        self.interval_seconds = interval_seconds
        self.keep_feed_order = keep_feed_order
        self.last_batch: List[NewsArticle] = []
        self._owns_scheduler = scheduler is None
        # Sem empilhamento: no máx. um tick agendado por vez, atrasados são fundidos
        self._scheduler = scheduler or BackgroundScheduler(
            job_defaults={
                "coalesce": True,
                "max_instances": 1,
                "misfire_grace_time": 30,
            }
        )
        self._job = None
        self._state = PollerState.idle
        self._state_lock = RLock()

    @property
    def state(self) -> PollerState:
        return self._state

    def start(self):
        with self._state_lock:
            if self._state is not PollerState.idle:
                raise RuntimeError(f"Poller cannot start from state '{self._state.value}'")
            self._state = PollerState.polling

        # Primeira execução imediata para aquecer os dados
        self.tick()

        with self._state_lock:
            # stop() pode ter rodado durante o tick inicial
            if self._state is not PollerState.polling:
                return
            self._job = self._scheduler.add_job(
                self.tick,
                "interval",
                seconds=self.interval_seconds,
                id=self.JOB_ID,
                replace_existing=True,
                max_instances=1,
                coalesce=True,
            )
            if self._owns_scheduler:
                self._scheduler.start()
        logger.info("Polling feed every %s seconds", self.interval_seconds)

    def tick(self) -> int:
        """Um ciclo: busca, insere na frente, poda. Retorna quantos itens entraram."""
        try:
            batch = self.feed.fetch() or []
            if not batch:
                logger.warning("Feed returned no items; skipping this tick")
                return 0

            # a mutação fica sob o lock de estado: depois que stop() retorna,
            # nenhum tick em voo altera a lista
            with self._state_lock:
                if self._state is PollerState.stopped:
                    logger.info("Poller stopped while fetching; discarding %d items", len(batch))
                    return 0
                inserted, pruned = self.feed_list.prepend(batch, keep_feed_order=self.keep_feed_order)
                self.last_batch = list(batch)
            logger.info(
                "Inserted %d items, pruned %d (list size %d)",
                inserted,
                pruned,
                len(self.feed_list),
            )
            return inserted
        except Exception:
            # a agenda continua; o próximo tick tenta de novo
            logger.exception("Feed tick failed")
            return 0

    def stop(self):
        with self._state_lock:
            if self._state is PollerState.stopped:
                return
            self._state = PollerState.stopped
            job, self._job = self._job, None

        if job is None:
            # nada agendado ainda (idle, ou stop durante o tick inicial)
            return
        if self._owns_scheduler:
            self._scheduler.shutdown(wait=False)
        else:
            job.remove()
        logger.info("Polling stopped")
