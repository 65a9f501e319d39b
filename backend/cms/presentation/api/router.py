"""Top-level API router: mounts every endpoint group under the API prefix."""

from fastapi import APIRouter

from cms.config import get_settings
from cms.presentation.api.endpoints.articles import router as articles_router
from cms.presentation.api.endpoints.auth import router as auth_router
from cms.presentation.api.endpoints.categories import router as categories_router
from cms.presentation.api.endpoints.health import router as health_router
from cms.presentation.api.endpoints.users import router as users_router

router = APIRouter(prefix=get_settings().api_prefix)
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(users_router)
router.include_router(articles_router)
router.include_router(categories_router)
