"""Review Ledger FastAPI application.

Single-domain web server that executes review instructions synchronously via
HTTP. Every ledger-facing request is wrapped in the ledger domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay is applied.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from ledger.domain import ledger  # noqa: E402
from reviews.program import install  # noqa: E402

ledger.init()
program_id = install()

_LEDGER_PREFIXES = ("/reviews", "/accounts")

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Review Ledger API",
    description="Restaurant reviews stored at submitter-derived ledger addresses",
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
    """Push the ledger domain context for ledger-facing requests."""
    if request.url.path.startswith(_LEDGER_PREFIXES):
        with ledger.domain_context():
            response = await call_next(request)
        return response
    # Health check, docs, etc.
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from ledger.api.errors import register_exception_handlers as register_ledger_handlers  # noqa: E402
from ledger.api.routes import account_router  # noqa: E402
from reviews.api.errors import register_exception_handlers as register_review_handlers  # noqa: E402
from reviews.api.routes import review_router  # noqa: E402

app.include_router(review_router)
app.include_router(account_router)
register_review_handlers(app)
register_ledger_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {"ledger": {"name": ledger.name}},
            "programs": {"reviews": program_id},
        }
    )
