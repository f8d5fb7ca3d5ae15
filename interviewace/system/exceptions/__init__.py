from interviewace.system.exceptions.api_exception_handler import common_exception_handler, validation_exception_handler
from interviewace.system.exceptions.base_exception import (
    BadRequestException,
    BaseHTTPException,
    NotFoundException,
    UnauthorizedException
)

__all__ = [
    "BaseHTTPException",
    "BadRequestException",
    "NotFoundException",
    "UnauthorizedException",
    "common_exception_handler",
    "validation_exception_handler"
]
