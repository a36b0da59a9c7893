"""Payment Factory FastAPI application.

Web server that processes factory commands synchronously via HTTP. Requests
under the factory prefix run inside the payment_factory domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay is applied:
#   - "test"       → event_processing = "sync"  (projectors fire in UoW)
#   - "production" → event_processing = "async" (projectors fire via Engine)
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from payment_factory.domain import payment_factory  # noqa: E402
from protean.integrations.fastapi import register_exception_handlers

payment_factory.init()

_ROUTE_PREFIX = "/payment-factories"

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Payment Factory API",
    description="Versioned payment instance deployment with provenance ledger",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the payment_factory domain context for factory requests."""
    if request.url.path.startswith(_ROUTE_PREFIX):
        with payment_factory.domain_context():
            response = await call_next(request)
        return response
    # Health check, docs, etc.
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from payment_factory.api import factory_router  # noqa: E402

app.include_router(factory_router)
register_exception_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "payment_factory": {"name": payment_factory.name},
            },
        }
    )
