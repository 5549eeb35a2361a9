import asyncio
import logging
from ic_court.db.session import engine
from ic_court.db.base import Base
# Import all models to register with Base
import ic_court.models  # noqa: F401

logger = logging.getLogger(__name__)

async def init_models():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables created.")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(init_models())
