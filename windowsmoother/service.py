from __future__ import annotations

import logging
import threading
import time
from typing import Any

from windowsmoother.config import AppConfig, SmootherSettings
from windowsmoother.models import SmoothedReading
from windowsmoother.smoothing.defaults import default_registry
from windowsmoother.smoothing.registry import AveragerRegistry
from windowsmoother.window import Clock, Smoother


class SmoothingChannel:
    def __init__(
        self,
        name: str,
        settings: SmootherSettings,
        registry: AveragerRegistry,
        clock: Clock = time.monotonic,
        logger: logging.Logger | None = None,
    ) -> None:
        self.name = name
        self._lock = threading.Lock()
        self._sequence = 0
        self._smoother = Smoother(
            settings.window_seconds,
            settings.method,
            clock=clock,
            logger=logger,
            registry=registry,
        )

    def submit(self, value: float) -> SmoothedReading:
        with self._lock:
            smoothed = self._smoother.smooth(value)
            self._sequence += 1
            return self._reading(value, smoothed)

    def current(self) -> SmoothedReading:
        with self._lock:
            return self._reading(None, self._smoother.value)

    def reset(self) -> None:
        with self._lock:
            self._smoother.reset()

    def _reading(self, value: Any, smoothed: Any) -> SmoothedReading:
        return SmoothedReading(
            channel=self.name,
            value=value,
            smoothed=smoothed,
            method=self._smoother.method.value,
            window_seconds=self._smoother.window_seconds,
            sample_count=len(self._smoother),
            timestamp=time.time(),
            sequence=self._sequence,
        )


class SmootherService:
    def __init__(
        self,
        config: AppConfig,
        clock: Clock = time.monotonic,
        logger: logging.Logger | None = None,
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)

        registry = default_registry()

        self._channels: dict[str, SmoothingChannel] = {}
        for channel_name, channel_settings in config.channels.items():
            self._channels[channel_name] = SmoothingChannel(
                name=channel_name,
                settings=channel_settings,
                registry=registry,
                clock=clock,
                logger=self._logger,
            )
            self._logger.info(
                f"channel '{channel_name}': {channel_settings.method.value} "
                f"over {channel_settings.window_seconds}s"
            )

    def channel_names(self) -> list[str]:
        return sorted(self._channels.keys())

    def channel(self, channel_name: str) -> SmoothingChannel:
        try:
            return self._channels[channel_name]
        except KeyError as exc:
            raise KeyError(f"Unknown channel '{channel_name}'") from exc

    def submit(self, channel_name: str, value: float) -> SmoothedReading:
        return self.channel(channel_name).submit(value)

    def current(self, channel_name: str) -> SmoothedReading:
        return self.channel(channel_name).current()

    def reset(self, channel_name: str) -> None:
        self.channel(channel_name).reset()
        self._logger.info(f"channel '{channel_name}' reset")
