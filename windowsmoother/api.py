from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from windowsmoother.config import AppConfig, load_config
from windowsmoother.logging_utils import setup_from_settings
from windowsmoother.models import SmoothedReading
from windowsmoother.service import SmootherService


class SampleIn(BaseModel):
    value: float


def _serialize_reading(reading: SmoothedReading) -> dict[str, object]:
    return {
        "channel": reading.channel,
        "value": reading.value,
        "smoothed": reading.smoothed,
        "method": reading.method,
        "window_seconds": reading.window_seconds,
        "sample_count": reading.sample_count,
        "timestamp": reading.timestamp,
        "timestamp_iso": datetime.fromtimestamp(reading.timestamp, tz=timezone.utc).isoformat(),
        "sequence": reading.sequence,
    }


def create_app(config_path: str | None = None) -> FastAPI:
    resolved_path = Path(config_path or os.environ.get("WINDOWSMOOTHER_CONFIG", "config.yaml"))
    config: AppConfig = load_config(resolved_path)
    logger = setup_from_settings(config.logging)
    service = SmootherService(config, logger=logger)

    app = FastAPI(title="WindowSmoother API", version="1.0.0")

    @app.get("/")
    async def root() -> dict[str, object]:
        return {
            "service": "windowsmoother",
            "channels": service.channel_names(),
            "config": str(resolved_path),
        }

    @app.get("/{channel_name}")
    async def get_current(channel_name: str) -> dict[str, object]:
        try:
            reading = service.current(channel_name)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return _serialize_reading(reading)

    @app.post("/{channel_name}")
    async def submit_sample(channel_name: str, sample: SampleIn) -> dict[str, object]:
        try:
            reading = service.submit(channel_name, sample.value)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return _serialize_reading(reading)

    @app.post("/{channel_name}/reset")
    async def reset_channel(channel_name: str) -> dict[str, object]:
        try:
            service.reset(channel_name)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return {"channel": channel_name, "reset": True}

    return app
