"""
Probability route translating a sigma magnitude into a normal-distribution rarity statement.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from fastapi import APIRouter, Query

from api.responses import RarityModel
from api.routes.common import rarity_model
from api.routes.exception import handle_exceptions
from engine.probability import estimate

router = APIRouter(tags=["Probability"])


@router.get("/probability", response_model=RarityModel, summary="Rarity of a sigma magnitude")
@handle_exceptions
async def probability(sigmas: float = Query(..., description="Number of standard deviations")) -> RarityModel:
    return rarity_model(estimate(sigmas))
