import logging
import uvicorn
from fastapi import FastAPI

from tictactoe_bot.core.config import settings
from tictactoe_bot.api.v1.endpoints import ai

from tictactoe_bot.core.logging_config import setup_logger, LOG_LEVEL

logger = setup_logger(__name__, level=LOG_LEVEL)

logger.info(f"Starting up {settings.PROJECT_NAME}...")
logger.info(f"Log level set to: {logging.getLevelName(logger.getEffectiveLevel())}")


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json"
)


@app.get("/")
async def root():
    logger.debug("Root endpoint '/' was called.")
    return {"message": f"Welcome to {settings.PROJECT_NAME} API"}

@app.get(f"{settings.API_V1_STR}/health", tags=["Health"])
async def health_check():
    """
    Simple health check endpoint.
    """
    logger.info("Health check endpoint called.")
    return {"status": "healthy"}

# Decision engine and board rendering
app.include_router(
    ai.router,
    prefix=settings.API_V1_STR,
    tags=["Decision Engine"]
)

logger.info(f"Included decision engine router at prefix: {settings.API_V1_STR}")

if __name__ == "__main__":

    logger.info("Running Uvicorn directly from main.py")
    uvicorn.run(app, host="0.0.0.0", port=8000)
