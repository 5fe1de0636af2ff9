"""
API v1 Main Router
Aggregates all v1 API endpoints into a single router.

Structure:
- /auth/* - Authentication endpoints (login)
- /users/* - Current user profile
- /categories - Category listing
- /jokes/* - Jokes, ratings and comments
"""

from fastapi import APIRouter

from app.api.v1 import auth, users, categories, jokes


# Create main v1 router
# This router will be included in main.py with prefix /api/v1
api_router = APIRouter()


# Endpoints: POST /auth/login
# No authentication required
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"],
)

# Endpoints: GET /users/me
# Requires authentication
api_router.include_router(
    users.router,
    prefix="/users",
    tags=["Users"],
)

# Endpoints: GET /categories
# prefix is already defined in categories.router (/categories)
api_router.include_router(categories.router)

# Endpoints: GET /jokes, GET /jokes/random, GET/PUT/DELETE /jokes/{id},
# POST /jokes, POST /jokes/{id}/rate, POST /jokes/{id}/comment
# Reads are public, writes require authentication
api_router.include_router(jokes.router)
