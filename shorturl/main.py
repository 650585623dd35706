from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from shorturl.core.config import settings
from shorturl.api.endpoints import codec
from shorturl.core.logging_config import configure_logging

logger = configure_logging()
logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Bijective integer <-> short string codec"
)

app.include_router(codec.router, prefix="/api/v1")

@app.get("/health", tags=["health"])
def health_check():
    return {"status": "healthy", "service": "shorturl-codec"}

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
