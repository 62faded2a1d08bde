"""Main v1 router aggregator"""
from fastapi import APIRouter

from billsplit.api.v1 import splits

# Create v1 router
api_router = APIRouter()

# Include all v1 routers
api_router.include_router(splits.router)
