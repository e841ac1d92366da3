from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
from dotenv import load_dotenv
from pathlib import Path

# Load .env from project root before settings are read
env_path = Path(__file__).resolve().parents[1] / '.env'
load_dotenv(dotenv_path=str(env_path))

from .core.config import settings
from .core.errors import RegistryError
from .models.models import ErrorResponse

# Configure logging
handlers = [logging.StreamHandler()]
if settings.LOG_FILE:
    handlers.append(logging.FileHandler(settings.LOG_FILE))
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=handlers
)
logger = logging.getLogger(__name__)

# --- FastAPI App Setup ---
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Registry of real-estate document records with per-document view permissions",
    version=settings.VERSION
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Import routers
from .routes import documents

app.include_router(documents.router, prefix=f"{settings.API_V1_STR}/documents", tags=["Estate Documents"])


@app.exception_handler(RegistryError)
async def registry_error_handler(request: Request, exc: RegistryError):
    body = ErrorResponse(**exc.to_dict())
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())

@app.get("/")
def read_root():
    logger.info("Root endpoint accessed")
    return {"message": "API is running"}

@app.on_event("startup")
async def startup_event():
    logger.info("Estate Registry API starting up...")
    logger.info(f"Network: {settings.NETWORK}")
    documents.get_registry()

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Estate Registry API shutting down...")
