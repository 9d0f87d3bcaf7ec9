from contextlib import asynccontextmanager
from fastapi import FastAPI
import uvicorn

from api.routes import router
from api.error_handlers import register_error_handlers
from core.config import HOST, PORT, INIT_DB
from core.database import init_db
from core.logging_config import get_logger

logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    if INIT_DB:
        logger.info("Preparing database schema...")
        await init_db()
    logger.info("Roomkeeper API started")
    yield
    logger.info("Roomkeeper API shutting down")

app = FastAPI(title="Roomkeeper API", lifespan=lifespan)
app.include_router(router)
register_error_handlers(app)

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
