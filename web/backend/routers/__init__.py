"""API route handlers."""

from .matching import router as matching_router
from .github import router as github_router
