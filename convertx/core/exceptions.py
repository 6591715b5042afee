"""
Custom Exceptions for convertx

Exception hierarchy that keeps user input errors (unknown units, bad
categories) apart from unsupported conversions and configuration problems.
"""

from typing import Dict, Any, Optional, Sequence


class ConvertxError(Exception):
    """Base exception for all convertx errors"""

    def __init__(self, message: str, details: Dict[str, Any] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self):
        base_msg = super().__str__()
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base_msg} (Details: {detail_str})"
        return base_msg


class ValidationError(ConvertxError):
    """Raised when a request or input value is malformed"""

    def __init__(self, message: str, field_name: str = None, value=None):
        details = {}
        if field_name:
            details['field'] = field_name
        if value is not None:
            details['value'] = str(value)
        super().__init__(message, details)


class InvalidUnitError(ValidationError):
    """Raised when a unit token is not defined for a category"""

    def __init__(self, message: str, category: str = None, token: str = None,
                 choices: Optional[Sequence[str]] = None):
        self.category = category
        self.token = token
        self.choices = tuple(choices or ())
        super().__init__(message, field_name='unit', value=token)
        if category:
            self.details['category'] = category


class UnsupportedConversionError(ConvertxError):
    """Raised when a pair of units has no conversion formula"""

    def __init__(self, message: str, from_unit: str = None, to_unit: str = None):
        self.from_unit = from_unit
        self.to_unit = to_unit
        details = {}
        if from_unit:
            details['from_unit'] = from_unit
        if to_unit:
            details['to_unit'] = to_unit
        super().__init__(message, details)


class ConfigurationError(ConvertxError):
    """Raised when configuration is invalid"""

    def __init__(self, message: str, parameter: str = None, value=None):
        details = {}
        if parameter:
            details['parameter'] = parameter
        if value is not None:
            details['value'] = str(value)
        super().__init__(message, details)
