from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from typing import Optional
from app.hello.routes import router as hello_router
from app.hello.services import GreetingService
from config import settings
import logging

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(greeting_service: Optional[GreetingService] = None) -> FastAPI:
    """
    Build the API with its own greeting service and visitor count
    """
    application = FastAPI(
        title="Greeting API",
        description="FastAPI greeting service that counts its visitors",
        version="1.0.0",
        debug=settings.DEBUG
    )

    # Add CORS middleware to allow requests from the frontend
    application.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.state.greeting_service = greeting_service or GreetingService()

    # Include routers
    application.include_router(hello_router)

    logger.info(f"Greeting API created for environment: {settings.APP_ENV}")
    return application


app = create_app()


def run():
    import uvicorn

    uvicorn.run(app, **settings.get_server_config())


if __name__ == "__main__":
    run()
