"""
Backend API - Nyumba Link rental listings
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.logging_config import setup_logging
from config.store_config import LOG_LEVEL, PROPERTY_STORE
from routers import dashboard_router, favorites_router, properties_router
from services.stats_service import get_local_now

setup_logging(LOG_LEVEL)

app = FastAPI(title="Nyumba Link API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Tables only exist for the SQL store
if PROPERTY_STORE == "sql":
    from config.db_connection import init_db
    init_db()

app.include_router(properties_router)
app.include_router(favorites_router)
app.include_router(dashboard_router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {"message": "Nyumba Link API is running", "timestamp": get_local_now(), "version": "1.0.0"}


@app.get("/health")
async def health():
    """Healthcheck for Docker"""
    return {"status": "healthy", "timestamp": get_local_now()}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
