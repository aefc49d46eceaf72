from fastapi import APIRouter

from paygate.api.routes import health, payment

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(payment.router, prefix="/payment", tags=["payment"])
