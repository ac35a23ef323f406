# Main application file

import logging
import time
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from surplus_sales.database import engine, Base
from surplus_sales.core.config import settings
from surplus_sales.core.exceptions import AppError
from surplus_sales.core.rate_limiter import limiter
from surplus_sales.models import (  # noqa: F401 (registers tables on Base)
    accessories as accessory_models,
    activity_logs as activity_log_models,
    cabs as cab_models,
    customers as customer_models,
    materials as material_models,
    sale_items as sale_item_models,
    sales as sale_models,
    users as user_models,
)
from surplus_sales.routers import (
    accessories,
    activity_logs,
    cabs,
    customers,
    materials,
    sales,
    users,
)


# LOGGING CONFIGURATION

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)s | %(message)s",
)

logger = logging.getLogger("surplus_sales")


# APP INIT

app = FastAPI(
    title="Surplus Sales API",
    description="Inventory and sales backend for surplus cabs, accessories and materials",
    version="1.0.0",
)


# CORS (Token-based auth)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Authorization", "Content-Type"],
)


# RATE LIMITING

app.state.limiter = limiter
app.add_exception_handler(
    RateLimitExceeded,
    _rate_limit_exceeded_handler
)


# APPLICATION ERRORS

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# REQUEST LOGGING MIDDLEWARE

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    duration = round((time.time() - start_time) * 1000, 2)

    logger.info(
        f"{request.method} {request.url.path} "
        f"Status: {response.status_code} "
        f"Time: {duration}ms"
    )

    return response


# DATABASE

if settings.AUTO_CREATE_TABLES:
    Base.metadata.create_all(bind=engine)


# ROUTERS

app.include_router(users.router, prefix="/api")
app.include_router(cabs.router, prefix="/api")
app.include_router(accessories.router, prefix="/api")
app.include_router(materials.router, prefix="/api")
app.include_router(customers.router, prefix="/api")
app.include_router(sales.router, prefix="/api")
app.include_router(activity_logs.router, prefix="/api")


# HEALTH

@app.get("/health")
def health():
    return {
        "status": "ok",
        "time": datetime.now(timezone.utc).isoformat(timespec="seconds"),
    }
