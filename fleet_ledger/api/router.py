"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from fleet_ledger.api.routes import rentals

api_router = APIRouter()

# Include all route modules
api_router.include_router(rentals.router)
