"""Health and service info schemas."""

from pydantic import BaseModel


class ConnectionTestResponse(BaseModel):
    success: bool = True
    message: str
    cloudinary: str
    timestamp: str


class ServiceInfoResponse(BaseModel):
    name: str
    version: str
    status: str
    environment: str
