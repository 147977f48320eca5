from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse
from typing import Optional
import logging
from .schemas import HelloRequest, HelloResponse, HealthResponse
from .services import GreetingService

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Hello"],
    prefix="",
    responses={404: {"description": "Not found"}},
)

def get_greeting_service(request: Request) -> GreetingService:
    """
    Resolve the greeting service owned by the running application
    """
    return request.app.state.greeting_service

@router.get("/", response_class=PlainTextResponse)
async def greeting(name: Optional[str] = None, service: GreetingService = Depends(get_greeting_service)):
    """
    Greet the caller and report their visitor number
    """
    try:
        message = service.greet(name)
        logger.info(message)
        return message
    except Exception as e:
        logger.error(f"Error building greeting: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Greeting error: {str(e)}")

@router.post("/hello", response_model=HelloResponse)
async def hello_with_name(request: HelloRequest, service: GreetingService = Depends(get_greeting_service)):
    """
    Hello endpoint that accepts a name
    """
    try:
        message = service.greet(request.name)
        logger.info(message)
        return HelloResponse(message=message)
    except Exception as e:
        logger.error(f"Error building greeting: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Greeting error: {str(e)}")

@router.get("/health", response_model=HealthResponse)
async def health_check(service: GreetingService = Depends(get_greeting_service)):
    """
    Health check endpoint
    """
    return HealthResponse(message="Server is running!", visitors=service.visitors)
