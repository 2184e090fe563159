"""Central API router aggregating all domain routers."""

from fastapi import APIRouter

from barberbook.admin.router import router as admin_router
from barberbook.appointment.router import router as appointment_router
from barberbook.auth.router import router as auth_router
from barberbook.barber.router import router as barber_router
from barberbook.health.router import router as health_router
from barberbook.preferences.router import router as preferences_router

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(preferences_router)
api_router.include_router(barber_router)
api_router.include_router(appointment_router)
api_router.include_router(admin_router)
