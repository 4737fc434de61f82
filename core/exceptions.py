#!/usr/bin/env python3
"""
Service exceptions shared by the matching engine, the GitHub analyzer and the
web layer.
"""


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class NotFoundException(ServiceException):
    """Raised when a requested record does not exist."""
    pass


class JobNotFoundException(NotFoundException):
    """Raised when a job posting is not found."""
    pass


class CandidateNotFoundException(NotFoundException):
    """Raised when a candidate profile is not found."""
    pass


class InvalidInputException(ServiceException):
    """Raised when a job or candidate record is malformed."""
    pass


class UpstreamServiceException(ServiceException):
    """Raised when an external data source (GitHub) cannot be reached."""
    pass


class LLMResponseError(ServiceException):
    """Raised when the text generation provider returns unusable output."""
    pass
