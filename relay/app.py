"""the relay starts from here."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from relay.config import Settings, settings
from relay.errors import RelayError
from relay.logging import setup_logging
from relay.routers import gh, info, interactions
from relay.services.delivery import DeliveryQueue
from relay.services.discord import discord_sender


async def relay_error_handler(_request: Request, exc: RelayError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


def create_app(cfg: Settings = settings) -> FastAPI:
    """Build the FastAPI app; the delivery queue lives for the app's lifespan."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(cfg.log_level, cfg.log_format)
        delivery = DeliveryQueue(
            discord_sender(cfg.discord_token),
            maxsize=cfg.delivery_queue_size,
            workers=cfg.delivery_workers,
        )
        await delivery.start()
        app.state.delivery = delivery
        try:
            yield
        finally:
            await delivery.stop()

    app = FastAPI(title="GitHub → Discord relay", lifespan=lifespan)
    app.add_exception_handler(RelayError, relay_error_handler)

    app.include_router(info.router)
    app.include_router(interactions.router)
    app.include_router(gh.router)
    return app


app = create_app()
