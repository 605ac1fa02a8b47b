import os
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.routes import health_router, products_router


def resolve_log_level(name: str) -> int:
    """Map a level name such as "debug" to its number, INFO if unknown."""
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        return logging.INFO
    return level


logging.basicConfig(
    level=resolve_log_level(os.environ.get("LOG_LEVEL", "INFO")),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Product API", version="1.0.0")

# Register routers
app.include_router(health_router)
app.include_router(products_router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
