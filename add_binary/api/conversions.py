"""Conversion API endpoints."""

from typing import List, Optional
from fastapi import APIRouter, Query

from add_binary.converter import convert_all, to_binary
from add_binary.core.config import get_config
from add_binary.core.exceptions import ConversionError, service_error_handler
from add_binary.models.schemas import AllConversionsResponse, ConversionResponse, OperationInfo
from add_binary.plugin_loader import plugin_loader


router = APIRouter(tags=["conversions"])


@router.get("/operations", response_model=List[OperationInfo])
async def list_operations():
    """List the registered conversion strategies."""
    return plugin_loader.get_operations_metadata()


@router.get("/convert", response_model=ConversionResponse)
async def convert(
    a: int = Query(...),
    b: int = Query(...),
    strategy: Optional[str] = None,
):
    """Render a + b in binary with one strategy."""
    name = strategy or get_config().default_strategy
    try:
        binary = to_binary(a, b, name)
    except ConversionError as e:
        raise service_error_handler(e)
    return ConversionResponse(a=a, b=b, strategy=name, binary=binary)


@router.get("/convert/all", response_model=AllConversionsResponse)
async def convert_with_all(a: int = Query(...), b: int = Query(...)):
    """Render a + b with every strategy."""
    try:
        results = convert_all(a, b)
    except ConversionError as e:
        raise service_error_handler(e)
    return AllConversionsResponse(
        a=a, b=b, results=results, consistent=len(set(results.values())) == 1
    )
