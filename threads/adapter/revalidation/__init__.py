"""Cache revalidation adapter."""

from .client import (
    HttpPathRevalidator,
    LoggingPathRevalidator,
    MockPathRevalidator,
)

__all__ = ["HttpPathRevalidator", "LoggingPathRevalidator", "MockPathRevalidator"]
