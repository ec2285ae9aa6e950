"""Pydantic models for API responses."""

from typing import Dict
from pydantic import BaseModel


class OperationInfo(BaseModel):
    name: str
    description: str
    solution: str


class ConversionResponse(BaseModel):
    a: int
    b: int
    strategy: str
    binary: str


class AllConversionsResponse(BaseModel):
    a: int
    b: int
    results: Dict[str, str]
    consistent: bool
