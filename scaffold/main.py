import logging
from urllib.parse import urlparse

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from scaffold.api.exception_handlers import register_exception_handlers
from scaffold.api.v1.router import api_router
from scaffold.core.config import settings

logger = logging.getLogger(__name__)

app = FastAPI()

if settings.frontend_url:
    parsed = urlparse(settings.frontend_url)
    origin = f"{parsed.scheme}://{parsed.netloc}"
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

if settings.expose_stack_trace:
    logger.warning("EXPOSE_STACK_TRACE is enabled; error responses include stack traces")

register_exception_handlers(app)
app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
def health():
    return {"status": "ok"}
