"""
Routes initialization for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health import router as health_router
from api.routes.series import router as series_router
from api.routes.probability import router as probability_router

router = APIRouter()

router.include_router(health_router)
router.include_router(series_router)
router.include_router(probability_router)

__all__ = ["router"]
