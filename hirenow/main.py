# ========================================
# hirenow/main.py - HIRENOW API ENTRY POINT
# ========================================

import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from hirenow.database import connect_to_mongo, close_mongo_connection

# ===========================
# IMPORT ALL ROUTERS
# ===========================

# Tokens & Accounts
from hirenow.routes.user import router as user_router

# Jobs
from hirenow.routes.job import router as job_router

# Applications
from hirenow.routes.application import router as application_router

# ===========================
# LOGGING
# ===========================
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# ===========================
# CREATE FASTAPI APP
# ===========================

app = FastAPI(
    title="HireNow API",
    description="Job board backend: job listings, employer and job seeker accounts, applications",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# ===========================
# CORS MIDDLEWARE
# ===========================
raw_origins = os.getenv("ALLOWED_ORIGINS", "http://localhost:5173,https://hirenow.netlify.app")
origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ===========================
# DATABASE EVENTS
# ===========================

@app.on_event("startup")
async def start_db():
    """Connect to MongoDB on startup"""
    await connect_to_mongo(app)

@app.on_event("shutdown")
async def stop_db():
    """Close MongoDB connection on shutdown"""
    await close_mongo_connection(app)

# ===========================
# REGISTER ROUTERS
# ===========================

app.include_router(user_router, tags=["Accounts"])
app.include_router(job_router, tags=["Jobs"])
app.include_router(application_router, tags=["Applications"])

# ===========================
# ROOT ENDPOINTS
# ===========================

@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Welcome to HireNow server"


@app.get("/health")
async def health_check(request: Request):
    """Health check endpoint, pings the database"""
    client = getattr(request.app.state, "mongo_client", None)

    database = "disconnected"
    if client is not None:
        try:
            await client.admin.command("ping")
            database = "connected"
        except Exception as e:
            logger.error("Database ping failed: %s", e)

    return {"status": "healthy", "database": database}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("hirenow.main:app", host="0.0.0.0", port=int(os.getenv("PORT", "5003")))
