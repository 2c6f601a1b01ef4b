"""
FastAPI entrypoint for the fleet ledger service.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fleet_ledger.core.config import settings
from fleet_ledger.api.router import api_router

app = FastAPI(
    title="Fleet Ledger API",
    description="Pricing, commission and payment ledger for fleet rentals",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": f"{settings.APP_NAME} API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
