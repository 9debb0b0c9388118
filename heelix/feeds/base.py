from abc import ABC, abstractmethod
from typing import List

from heelix.storage.models import NewsArticle


class BaseFeed(ABC):
    @abstractmethod
    def fetch(self) -> List[NewsArticle]:
        pass
