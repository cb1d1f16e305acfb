"""
src/data/performance.py
───────────────────────
Device performance sampler.

  memory        — resident memory of this process vs. total RAM (MB), or a
                  simulated value in a fixed band when psutil cannot read it
  network_type  — "online" / "offline" from interface state
  cpu_load      — simulated, uniform integer in [15, 55)
  cores         — logical core count

No retry: the dashboard simply resamples on its timer.
"""
from __future__ import annotations

import logging

import numpy as np
import psutil

from src.data.models import MemoryUsage, PerformanceSnapshot

logger = logging.getLogger(__name__)

CPU_LOAD_RANGE = (15, 55)
SIMULATED_MEMORY_USED_MB = (40.0, 120.0)
SIMULATED_MEMORY_TOTAL_MB = 256.0
_MB = 1024 * 1024


def _memory_usage(rng: np.random.Generator) -> MemoryUsage:
    try:
        used = psutil.Process().memory_info().rss / _MB
        total = psutil.virtual_memory().total / _MB
    except (psutil.Error, OSError) as exc:
        logger.debug("Memory info unavailable, simulating: %s", exc)
        low, high = SIMULATED_MEMORY_USED_MB
        return MemoryUsage(used=round(float(rng.uniform(low, high)), 1), total=SIMULATED_MEMORY_TOTAL_MB)
    return MemoryUsage(used=round(used, 1), total=round(total, 1))


def _network_type() -> str | None:
    try:
        stats = psutil.net_if_stats()
    except (psutil.Error, OSError) as exc:
        logger.debug("Network stats unavailable: %s", exc)
        return None
    online = any(s.isup for name, s in stats.items() if not name.startswith("lo"))
    return "online" if online else "offline"


def sample_performance(rng: np.random.Generator) -> PerformanceSnapshot:
    """Take one performance sample."""
    low, high = CPU_LOAD_RANGE
    return PerformanceSnapshot(
        cpu_load=int(rng.integers(low, high)),
        memory=_memory_usage(rng),
        cores=psutil.cpu_count(logical=True),
        network_type=_network_type(),
    )
