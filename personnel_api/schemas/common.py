from pydantic import BaseModel


class HealthOut(BaseModel):
    status: str
    message: str


class MessageOut(BaseModel):
    message: str
