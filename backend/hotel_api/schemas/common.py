"""Schemas shared across routers."""

from pydantic import BaseModel


class ResultResponse(BaseModel):
    """Fixed marker returned by delete endpoints."""

    result: str = "success"
