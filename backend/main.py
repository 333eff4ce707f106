from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
import logging
import os

from .config import settings
from .database import engine, Base
from .po_calculator import ValidationError
from .routers import customer_pos, supplier_pos, purchase_orders, reports

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
)
logger = logging.getLogger("steel_tubes")

# Fresh databases get every table here; column changes go through alembic/versions
Base.metadata.create_all(bind=engine)

BASE_REVISION = "3f9a1c2b7d41"


def _run_migrations():
    """Bring the schema up to the latest Alembic revision.

    A database whose PO tables came from create_all() has no alembic_version
    row yet, so it is stamped at BASE_REVISION before upgrading.
    """
    try:
        from alembic.config import Config
        from alembic import command
        from sqlalchemy import inspect

        alembic_ini = os.path.join(os.path.dirname(__file__), "..", "alembic.ini")
        if not os.path.exists(alembic_ini):
            logger.info("alembic.ini not found, skipping migrations")
            return

        alembic_cfg = Config(alembic_ini)
        alembic_cfg.set_main_option("sqlalchemy.url", settings.DATABASE_URL)
        alembic_cfg.attributes["configure_logger"] = False

        insp = inspect(engine)
        tables = insp.get_table_names()
        if "alembic_version" not in tables and "customer_pos" in tables:
            logger.info(f"Stamping base migration {BASE_REVISION} (tables already exist)")
            command.stamp(alembic_cfg, BASE_REVISION)

        logger.info("Upgrading schema to head")
        command.upgrade(alembic_cfg, "head")
        logger.info("Migrations complete")

    except Exception as e:
        # Startup continues on the create_all() schema
        logger.warning(f"Alembic migration warning: {e}")

app = FastAPI(
    title=f"{settings.COMPANY_NAME} Backend",
    description="Purchase orders, weight/GST pricing and sales reports for steel tubes",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
def handle_validation_error(request: Request, exc: ValidationError):
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"success": False, "message": str(exc)})


@app.exception_handler(SQLAlchemyError)
def handle_database_error(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"success": False, "message": str(exc)})


# API routes
app.include_router(customer_pos.router, prefix="/api")
app.include_router(supplier_pos.router, prefix="/api")
app.include_router(reports.router, prefix="/api")
# Legacy routes stay at the root
app.include_router(purchase_orders.router)


@app.get("/", response_class=PlainTextResponse)
def root():
    return f"✅ {settings.COMPANY_NAME} Backend is running!"

@app.get("/health")
def health():
    return {"status": "ok", "app": "steel-tubes-backend"}

@app.get("/api/ping")
def ping():
    return {"message": "Server is live!"}


@app.on_event("startup")
def auto_migrate():
    """Apply schema migrations before serving requests."""
    _run_migrations()
