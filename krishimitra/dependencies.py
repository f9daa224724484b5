"""
dependencies.py — Shared FastAPI dependencies.
"""

import asyncio

from krishimitra.config import SIMULATED_LATENCY_SECONDS


async def simulated_latency():
    """Delay calculation responses the way the dashboard's mocked fetches did."""
    if SIMULATED_LATENCY_SECONDS > 0:
        await asyncio.sleep(SIMULATED_LATENCY_SECONDS)
