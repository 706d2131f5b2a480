"""Process resource gauges, sampled from a background task."""
from __future__ import annotations

import asyncio
import os
from typing import Optional

import psutil

from hello_service.metrics import (
    process_cpu_percentage,
    process_memory_rss_bytes,
    process_threads,
)


class ProcessSampler:
    """Copies CPU, memory and thread figures of one process into the gauges."""

    def __init__(self, process: Optional[psutil.Process] = None) -> None:
        self._process = process or psutil.Process(os.getpid())
        # cpu_percent() reports usage since its previous call; the first is always 0.0
        self._process.cpu_percent(None)

    def sample(self) -> None:
        with self._process.oneshot():
            process_cpu_percentage.set(self._process.cpu_percent(None))
            process_memory_rss_bytes.set(self._process.memory_info().rss)
            process_threads.set(self._process.num_threads())


async def run_sampler(interval_seconds: float = 5, sampler: Optional[ProcessSampler] = None) -> None:
    """Sample every *interval_seconds* until cancelled."""
    sampler = sampler or ProcessSampler()
    while True:
        await asyncio.sleep(interval_seconds)
        sampler.sample()
