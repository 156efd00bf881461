from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(default="ok")
    message: str


class EndpointDescriptor(BaseModel):
    method: str
    path: str
    description: str


class ServiceIndex(BaseModel):
    status: str = Field(default="ok")
    message: str
    endpoints: list[EndpointDescriptor] = Field(default_factory=list)
