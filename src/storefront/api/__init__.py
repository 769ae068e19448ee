"""Storefront API package and application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.errors import register_exception_handlers
from storefront.api.routes import order_router, vendor_router
from storefront.domain import storefront
from storefront.order.lifecycle import OrderLifecycle
from storefront.order.store import OrderStore
from storefront.utils.logging import add_context, clear_context

__all__ = ["create_app", "order_router", "vendor_router"]


def create_app(store=None, notifier=None, domain=storefront) -> FastAPI:
    """Build the storefront app around its own store and notifier.

    The domain must already be initialized.
    """
    if notifier is None:
        from storefront.notifications.notifier import get_notifier

        notifier = get_notifier()
    store = store if store is not None else OrderStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.notifier.drain(timeout=30)

    app = FastAPI(
        title="Storefront Orders API",
        description="Bakery order intake, vendor console and customer notifications",
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.notifier = notifier
    app.state.lifecycle = OrderLifecycle(store, notifier)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the Protean domain context and bind request log context."""
        add_context(method=request.method, path=request.url.path)
        try:
            with domain.domain_context():
                response = await call_next(request)
        finally:
            clear_context()
        return response

    register_exception_handlers(app)
    app.include_router(order_router)
    app.include_router(vendor_router)

    @app.get("/health")
    async def health():
        return {
            "status": "ok",
            "domain": domain.name,
            "orders": app.state.store.count(),
            "email_configured": app.state.notifier.is_configured,
        }

    return app
