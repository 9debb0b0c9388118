from typing import Callable, Generic, Iterable, Iterator, List, Tuple, TypeVar
from threading import Lock

T = TypeVar("T")
Listener = Callable[[Tuple], None]

DEFAULT_MAX_ITEMS = 50


class FeedList(Generic[T]):
    """
    Lista limitada, mais recente primeiro.

    Inserção sempre na frente, remoção sempre no fim. Um único escritor (o poller)
    e vários leitores; leitores recebem um snapshot imutável (tupla), nunca a lista
    interna. Listeners inscritos via `subscribe` recebem o snapshot novo após cada
    mutação.
    """

    def __init__(self, max_items: int = DEFAULT_MAX_ITEMS):
        if max_items < 1:
            raise ValueError(f"max_items must be >= 1, got {max_items}")
        self.max_items: int = max_items
        self._items: List[T] = []
        self._listeners: List[Listener] = []
        self._lock = Lock()  # ticks do scheduler rodam em threads

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.snapshot())

    def snapshot(self) -> Tuple[T, ...]:
        with self._lock:
            return tuple(self._items)

    def prepend(self, items: Iterable[T], keep_feed_order: bool = False) -> Tuple[int, int]:
        """
        Insere o lote na frente da lista e poda o excesso, numa única operação.

        Por padrão cada item é inserido individualmente na posição 0, então o lote
        [A, B, C] resulta em [C, B, A, ...]. Com `keep_feed_order=True` o lote entra
        como bloco e mantém a ordem do feed. Listeners recebem um só snapshot, já
        podado. Retorna (inseridos, podados).
        """
        batch = list(items)
        if not batch:
            return 0, 0
        with self._lock:
            if keep_feed_order:
                self._items[:0] = batch
            else:
                for item in batch:
                    self._items.insert(0, item)
            removed = self._prune_locked()
            snap = tuple(self._items)
        self._notify(snap)
        return len(batch), removed

    def prune(self) -> int:
        """Remove do fim até `len <= max_items`. Retorna quantos itens saíram."""
        with self._lock:
            removed = self._prune_locked()
            snap = tuple(self._items)
        if removed:
            self._notify(snap)
        return removed

    def _prune_locked(self) -> int:
        removed = 0
        while len(self._items) > self.max_items:
            self._items.pop()
            removed += 1
        return removed

    def clear(self):
        with self._lock:
            had_items = bool(self._items)
            self._items.clear()
        if had_items:
            self._notify(())

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe():
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, snap: Tuple):
        # chamados fora do lock para permitir leituras dentro do listener
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(snap)
