"""API v1 router aggregating all endpoint routers.

All endpoints are mounted under /api/v1/meal-planner/ via the v1_prefix configuration.
"""

from __future__ import annotations

from fastapi import APIRouter

from meal_planner.api.v1.endpoints import config, health, jobs, meal_plans, recipes


router = APIRouter()

router.include_router(health.router)
router.include_router(recipes.router)
router.include_router(meal_plans.router)
router.include_router(config.router)
router.include_router(jobs.router)
