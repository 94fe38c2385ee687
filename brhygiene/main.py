from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
import os
import json
import logging

from brhygiene.api.endpoints import inquiries, products
from brhygiene.core.config import settings
from brhygiene.core.logging import setup_logging

logger = logging.getLogger(__name__)

with open(os.path.join(os.path.dirname(__file__), "log_config.json"), "r") as file:
    LOGGING_CONFIG = json.load(file)

setup_logging()

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Backend for the BR Hygiene website: contact form inquiries and product catalog",
    version="0.1.0",
    debug=settings.DEBUG,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials="*" not in settings.ALLOWED_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    max_age=86400,
)

app.include_router(
    inquiries.router,
    prefix=f"{settings.API_PREFIX}/inquiries",
    tags=["inquiries"],
)

app.include_router(
    products.router,
    prefix=f"{settings.API_PREFIX}/products",
    tags=["products"],
)


@app.get("/", tags=["status"])
async def root():
    return {"status": "online", "service": settings.PROJECT_NAME}


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error", "path": str(request.url)},
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "brhygiene.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", 8000)),
        reload=settings.DEBUG,
        log_config=LOGGING_CONFIG,
    )
