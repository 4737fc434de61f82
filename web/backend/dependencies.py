#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

import logging
from functools import lru_cache

from core.app_context import AppContext
from database.database import configure_engine
from .config import get_config

logger = logging.getLogger(__name__)


@lru_cache()
def get_app_context() -> AppContext:
    """
    FastAPI dependency returning the wired application context.

    The first call binds the session factory to the configured database.
    Tests replace it through ``app.dependency_overrides``.

    Usage:
        @router.post("/endpoint")
        def my_endpoint(ctx: AppContext = Depends(get_app_context)):
            ...
    """
    config = get_config()
    configure_engine(config.database.url, pool_pre_ping=True)
    logger.info("Application context built")
    return AppContext.build(config)
