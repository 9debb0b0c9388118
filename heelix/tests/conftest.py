# heelix/tests/conftest.py
import pytest

from heelix.config import Settings
from heelix.feeds.base import BaseFeed
from heelix.storage.models import NewsArticle


def make_article(doc_id, headline=None):
    return NewsArticle.model_validate({
        "Document": {
            "Id": doc_id,
            "Headline": headline or f"Document {doc_id}",
            "InsertDate": 1500000000 + doc_id,
            "Source": "Reuters",
            "Url": f"http://www.example.com/fake-document/{doc_id}",
        },
        "Persons": [],
        "Orgs": [],
        "Places": [],
    })


class FakeFeed(BaseFeed):
    """Devolve os lotes enfileirados, um por fetch; depois disso, lista vazia."""

    def __init__(self, *batches):
        self.batches = list(batches)
        self.calls = 0

    def fetch(self):
        self.calls += 1
        if not self.batches:
            return []
        return self.batches.pop(0)


class DummyScheduler:
    """Substitui o BackgroundScheduler: guarda o job sem rodar nada."""

    class Job:
        def __init__(self, owner, func, kwargs):
            self.owner = owner
            self.func = func
            self.kwargs = kwargs
            self.removed = False

        def remove(self):
            self.removed = True
            self.owner.jobs.remove(self)

    def __init__(self):
        self.jobs = []

    def add_job(self, func, trigger, **kwargs):
        job = self.Job(self, func, dict(kwargs, trigger=trigger))
        self.jobs.append(job)
        return job

    def start(self): pass
    def shutdown(self, wait=False): pass


@pytest.fixture()
def scheduler():
    return DummyScheduler()


@pytest.fixture()
def web_root(tmp_path):
    public = tmp_path / "public"
    (public / "styles").mkdir(parents=True)
    (public / "styles" / "widget.css").write_text("body { color: red; }", encoding="utf-8")
    (public / "logo.bin").write_bytes(b"\x89PNG\x00\x01\x02")
    index = tmp_path / "index.html"
    index.write_text("<html><body>heelix app</body></html>", encoding="utf-8")
    return tmp_path


@pytest.fixture()
def settings(web_root):
    return Settings(
        public_dir=str(web_root / "public"),
        index_file=str(web_root / "index.html"),
    )


@pytest.fixture()
def client(settings):
    from fastapi.testclient import TestClient
    from heelix.api.main import create_app

    with TestClient(create_app(settings)) as c:
        yield c
