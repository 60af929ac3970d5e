"""API route aggregation.

All routers registered here get mounted in main.py.

Learn: unlike a blanket auth dependency on include_router, auth here is
per operation: reads are open and each write route declares its own
require_identity() dependency, so the policy lives in one setting.
"""

from fastapi import APIRouter

from restboard.api.echo import router as echo_router
from restboard.api.health import router as health_router
from restboard.api.messages import router as messages_router
from restboard.api.session import router as session_router
from restboard.api.users import router as users_router

api_router = APIRouter()

api_router.include_router(echo_router, tags=["echo"])
api_router.include_router(health_router, tags=["health"])
api_router.include_router(session_router, tags=["session"])
api_router.include_router(users_router, tags=["users"])
api_router.include_router(messages_router, tags=["messages"])
