# app/schemas/common.py
from pydantic import BaseModel


class MessageRead(BaseModel):
    """
    Simple confirmation body returned by delete endpoints.
    """

    message: str
