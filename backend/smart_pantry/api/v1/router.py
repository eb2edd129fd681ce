"""
API v1 Main Router
Aggregates all v1 API endpoints into a single router.

Structure:
- /auth/* - Authentication endpoints (register, login, refresh, me)
- /products/* - Barcode resolution, manual registration, overview
- /expiry-dates/* - Per-user expiry overrides
- /weights/* - Scale readings and weight history
- /devices/* - Registered scales
- /pantry/* - Pantry stock management
- /notifications/* - Reminder preferences and expiring-items digest
"""

from fastapi import APIRouter

from smart_pantry.api.v1 import auth, products, expiry_dates, weights, devices, pantry, notifications


# Included in main.py with prefix /api/v1
api_router = APIRouter()


# Endpoints: POST /auth/register, /auth/login, /auth/refresh, GET /auth/me
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"],
)

# Endpoints: GET /products/resolve/{barcode}, GET/POST /products, GET /products/{barcode}/overview
# prefix is already defined in products.router (/products)
api_router.include_router(products.router)

# Endpoints: GET /expiry-dates, GET/PUT/DELETE /expiry-dates/{barcode}
api_router.include_router(expiry_dates.router)

# Endpoints: POST /weights/readings, POST /weights/device-readings, POST /weights/simulate, GET /weights/{barcode}/history|current
api_router.include_router(weights.router)

# Endpoints: GET/POST /pantry, GET /pantry/stats, GET/PUT/DELETE /pantry/{id}, POST /pantry/{id}/consume
api_router.include_router(pantry.router)

# Endpoints: GET/POST /devices, PUT/DELETE /devices/{id}, POST /devices/{id}/token
api_router.include_router(devices.router)

# Endpoints: GET/PUT /notifications/preferences, GET /notifications/digest
api_router.include_router(notifications.router)
