from pydantic import BaseModel
from typing import Optional

class HelloRequest(BaseModel):
    name: Optional[str] = None

class HelloResponse(BaseModel):
    message: str
    status: str = "success"

class HealthResponse(BaseModel):
    message: str
    status: str = "healthy"
    visitors: int
