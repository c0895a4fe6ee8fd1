"""
Process-wide shared HTTP transport.

The first caller fixes the base URL and timeout, and every later caller gets a
transport built from those settings, whatever it asks for. An
``httpx.AsyncClient`` pools connections on the event loop that opened them, so
one client is kept per running loop; a client whose loop has closed is dropped
and rebuilt on next use. All bookkeeping happens under one lock so concurrent
first calls still agree on a single instance per loop.
"""

from __future__ import annotations

import asyncio
import logging
from threading import Lock
from typing import Dict, List, Optional, Tuple

import httpx

logger = logging.getLogger(__name__)

_lock = Lock()
_settings: Optional[Tuple[str, float]] = None
_transports: Dict[Optional[asyncio.AbstractEventLoop], httpx.AsyncClient] = {}


def _build_client(base_url: str, timeout: float) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=base_url, timeout=timeout)


def _current_loop() -> Optional[asyncio.AbstractEventLoop]:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


def _prune_dead_loops() -> None:
    for loop in [loop for loop in _transports if loop is not None and loop.is_closed()]:
        # Its pooled connections died with the loop and cannot be closed from here.
        del _transports[loop]
        logger.debug("Dropped shared DeSo transport bound to a closed event loop")


def get_shared_transport(base_url: str, timeout: float) -> httpx.AsyncClient:
    """Return the shared transport for the running loop, creating it on first use."""
    global _settings
    loop = _current_loop()
    with _lock:
        _prune_dead_loops()
        if _settings is None:
            _settings = (base_url, timeout)
        client = _transports.get(loop)
        if client is None or client.is_closed:
            client = _build_client(*_settings)
            _transports[loop] = client
            logger.debug("Created shared DeSo transport for %s", _settings[0])
        return client


def shared_transport_settings() -> Optional[Tuple[str, float]]:
    """Base URL and timeout every shared transport is built with, or None before first use."""
    with _lock:
        if _settings is None:
            return None
        return _settings[0].rstrip("/"), _settings[1]


def shared_transport_base_url() -> Optional[str]:
    settings = shared_transport_settings()
    return settings[0] if settings is not None else None


async def close_shared_transport() -> None:
    """Close and forget the shared transports; the next request starts over."""
    global _settings
    loop = _current_loop()
    with _lock:
        closable: List[httpx.AsyncClient] = [
            client
            for owner, client in _transports.items()
            if owner is None or owner is loop
        ]
        _transports.clear()
        _settings = None
    for client in closable:
        await client.aclose()
