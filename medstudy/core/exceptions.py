"""
Custom exceptions and error handling for the medical study content client
"""
from typing import Optional, Dict, Any


class MedStudyException(Exception):
    """Base exception for the medical study content client"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class GenerationError(MedStudyException):
    """Remote generation returned a result that cannot be used"""
    pass


class NoTextPayloadError(GenerationError):
    """Remote generation returned an empty or missing text payload"""
    pass


class NoImageGeneratedError(GenerationError):
    """No candidate part carried inline image data"""
    pass


class ValidationError(MedStudyException):
    """Input validation error"""
    pass


class ConfigurationError(MedStudyException):
    """Configuration error"""
    pass


class MissingCredentialError(ConfigurationError):
    """Operation needs a live Gemini client but no API key is configured"""

    def __init__(self, operation: str):
        super().__init__(
            f"{operation} requires a Gemini API key; set GEMINI_API_KEY",
            {"operation": operation}
        )
        self.operation = operation
