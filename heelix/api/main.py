import os
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import FileResponse

from heelix.config import Settings
from heelix.utils.log_utils import configure_logging

logger = logging.getLogger(__name__)

# Validadores de cache desligados: sem GET condicional
_CACHE_VALIDATOR_HEADERS = ("etag", "last-modified")


def _resolve_static(public_dir: str, request_path: str) -> Optional[str]:
    """
    Caminho do arquivo pedido dentro de `public_dir`, ou None se não existir ou
    escapar da raiz. Um diretório resolve para o seu `index.html`, como no
    express.static.
    """
    root = os.path.realpath(public_dir)
    try:
        candidate = os.path.realpath(os.path.join(root, request_path.lstrip("/")))
    except ValueError:
        # ex.: byte nulo decodificado de %00
        return None
    if os.path.commonpath([root, candidate]) != root:
        return None
    if os.path.isdir(candidate):
        candidate = os.path.join(candidate, "index.html")
    if not os.path.isfile(candidate):
        return None
    return candidate


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    public_dir = settings.public_dir
    index_file = settings.index_file

    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings

    @app.middleware("http")
    async def disable_cache_validators(request: Request, call_next):
        response = await call_next(request)
        for header in _CACHE_VALIDATOR_HEADERS:
            if header in response.headers:
                del response.headers[header]
        return response

    # Rota padrão: arquivo estático se existir, senão sempre a mesma página HTML
    # (o roteamento fica a cargo do cliente)
    @app.api_route("/{full_path:path}", methods=["GET", "HEAD"], include_in_schema=False)
    def serve(full_path: str):
        path = _resolve_static(public_dir, full_path)
        if path is None:
            return FileResponse(index_file, media_type="text/html")
        return FileResponse(path)

    return app


# Montado na importação para `uvicorn heelix.api.main:app`; valores HEELIX_*
# inválidos fazem a importação falhar com ValueError.
app = create_app()


def main():
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    logger.info("Server started on port %d", settings.admin_port)
    uvicorn.run(create_app(settings), host=settings.admin_host, port=settings.admin_port)


if __name__ == "__main__":
    main()
