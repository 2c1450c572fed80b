import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pattern_atlas import __version__, config
from pattern_atlas.api.routes import router
from pattern_atlas.errors import PatternNotFoundError
from pattern_atlas.patterns.registry import get_pattern_registry

config.configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Pattern Atlas",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.exception_handler(PatternNotFoundError)
async def pattern_not_found_handler(request: Request, exc: PatternNotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.on_event("startup")
def startup():
    registry = get_pattern_registry()
    logger.info("Pattern Atlas ready with %d patterns", len(registry))
