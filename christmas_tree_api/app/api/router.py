"""
Top‑level API router.

Domain routers are mounted here and the whole tree is served under
``/api`` by :func:`christmas_tree_api.app.main.create_app`.  The
``permit_all`` dependency runs for every route.
"""

from fastapi import APIRouter, Depends

from christmas_tree_api.app.core.security import permit_all
from .endpoints import messages


router = APIRouter(dependencies=[Depends(permit_all)])

router.include_router(messages.router, prefix="/message", tags=["messages"])
