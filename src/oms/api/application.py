"""FastAPI application factory.

Keeps app construction separate from domain initialization so the same app
can be served by uvicorn (see ``src/app.py``) or built inside tests against
an already initialized domain.
"""

from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.domain import Domain

from oms.api.errors import install_error_handlers
from oms.api.routes import order_router, product_router, user_router
from oms.utils.logging import bind_request_context, clear_request_context

API_PREFIX = "/api"

ALLOWED_ORIGINS = [
    "http://localhost",
    "http://localhost:80",
    "http://localhost:5173",
    "http://localhost:3000",
    "http://frontend:80",
]


def create_app(domain: Domain) -> FastAPI:
    app = FastAPI(
        title="Order Management API",
        description="Users, products and the order lifecycle with stock bookkeeping",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept", "Authorization", "X-Request-ID"],
        expose_headers=["Content-Length", "X-Request-ID"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the Protean domain context for API requests and tag their log lines."""
        if request.url.path.startswith(API_PREFIX):
            request_id = request.headers.get("X-Request-ID") or uuid4().hex
            bind_request_context(request_id=request_id, method=request.method, path=request.url.path)
            try:
                with domain.domain_context():
                    response = await call_next(request)
            finally:
                clear_request_context()
            response.headers["X-Request-ID"] = request_id
            return response
        # Health check, docs, etc.
        return await call_next(request)

    app.include_router(user_router, prefix=API_PREFIX)
    app.include_router(product_router, prefix=API_PREFIX)
    app.include_router(order_router, prefix=API_PREFIX)
    install_error_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": domain.name})

    return app
