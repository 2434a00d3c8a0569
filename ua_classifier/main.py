# ua_classifier/main.py

from contextlib import asynccontextmanager
from fastapi import FastAPI
from ua_classifier import __version__
from ua_classifier.api import router as api_router
from ua_classifier.config import settings
from ua_classifier.context import UserAgentContextMiddleware
from ua_classifier.signatures import BOT_SIGNATURES, BROWSER_SIGNATURES, OS_SIGNATURES
import logging

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""

    logger.info("Starting User Agent Classifier...")
    logger.info(
        f"Loaded {len(BROWSER_SIGNATURES)} browser, {len(OS_SIGNATURES)} OS "
        f"and {len(BOT_SIGNATURES)} bot signatures"
    )
    logger.info(f"Catalog locale: {settings.locale}")

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title="User Agent Classifier",
    description="Detects browser, operating system and device type from User-Agent headers",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(UserAgentContextMiddleware)

# Register routes
app.include_router(api_router)
