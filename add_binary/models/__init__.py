"""API request and response models."""

from .schemas import ConversionResponse, AllConversionsResponse, OperationInfo

__all__ = ["ConversionResponse", "AllConversionsResponse", "OperationInfo"]
