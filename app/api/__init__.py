"""API router for v1 endpoints."""

from fastapi import APIRouter

from app.api import ecosystems, migrations

router = APIRouter()

# Ecosystem catalog and difficulty tier routes
router.include_router(ecosystems.router, tags=["ecosystems"])

# Migration report routes
router.include_router(migrations.router, tags=["migrations"])
