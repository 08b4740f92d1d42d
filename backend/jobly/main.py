import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from jobly import __version__
from jobly.config import settings
from jobly.database import init_db
from jobly.errors import register_error_handlers
from jobly.routers import companies, jobs

logger = logging.getLogger("jobly")


def configure_logging(level: str | None = None):
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    init_db()
    logger.info("Jobly API %s started.", __version__)
    yield


app = FastAPI(
    title="Jobly",
    description="Job board API: jobs and the companies that post them",
    version=__version__,
    lifespan=lifespan,
)

register_error_handlers(app)

app.include_router(jobs.router, prefix=settings.api_prefix)
app.include_router(companies.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "ok", "version": __version__}
