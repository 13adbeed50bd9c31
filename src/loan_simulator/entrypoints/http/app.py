from fastapi import FastAPI

from loan_simulator.entrypoints.http.exception_handlers import register_exception_handlers
from loan_simulator.entrypoints.http.routes.health import router as health_router
from loan_simulator.entrypoints.http.routes.loan_simulator import router as loan_simulator_router
from loan_simulator.infra.config import app_timezone
from loan_simulator.infra.log_config import configure_logging


def build_app() -> FastAPI:
    configure_logging()
    # Fail at startup rather than on the first request
    app_timezone()

    app = FastAPI(
        title="Loan Simulator API",
        description="""
        Loan simulation API for fixed-rate amortizing loans.

        ## Features
        - Age-tiered annual interest rate
        - Monthly payment, total amount and total interest

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(loan_simulator_router, prefix="/api/v1")

    return app


app = build_app()
