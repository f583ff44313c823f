import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_cors_origins, get_simulated_latency, is_debug
from .routes.scope import router as scope_router


# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):

    # Startup
    print("Starting Briefly scope builder")
    print(f"   Simulated model latency: {get_simulated_latency():.1f}s")
    print(f"   Debug mode: {'on' if is_debug() else 'off'}")
    print("   Ready to scope client briefs!")

    yield

    print("Shutting down Briefly scope builder")


app = FastAPI(
    title="Briefly - Technical Scope Builder for Software Projects",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],  # Allow all HTTP methods
    allow_headers=["*"],  # Allow all headers
)

app.include_router(scope_router)


@app.get(
    "/",
    summary="API Root",
    description="Welcome endpoint with API information",
    tags=["General"]
)
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Briefly",
        "version": "0.1.0",
        "description": "Technical scope builder for software projects",
        "docs": "/docs",
        "endpoints": {
            "generate": "POST /scope/generate - Generate a technical scope from a client brief",
            "export": "POST /scope/export - Export the scope document (not implemented yet)",
            "stacks": "GET /scope/stacks - Preferred stack options",
            "health": "GET /scope/health - Service health check"
        }
    }


@app.get(
    "/health",
    summary="Global Health Check",
    description="Check if the API server is running",
    tags=["General"]
)
async def health():
    """Global health check endpoint."""
    return {
        "status": "healthy",
        "service": "briefly-scope-builder",
        "version": "0.1.0"
    }


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler for unhandled errors."""
    logger.error("Unhandled error on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "detail": str(exc) if is_debug() else "An unexpected error occurred"
        }
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "briefly.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        reload=is_debug(),
    )
