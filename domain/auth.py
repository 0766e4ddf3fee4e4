"""Domain Entities - Auth"""
from pydantic import BaseModel
from typing import Optional


class Operator(BaseModel):
    """Front desk operator allowed to drive bookings"""
    username: str
    full_name: Optional[str] = None
    disabled: bool = False

    class Config:
        from_attributes = True


class OperatorInDB(Operator):
    """Operator with hashed password"""
    hashed_password: str
