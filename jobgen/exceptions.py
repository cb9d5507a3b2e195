# jobgen/exceptions.py
"""
Errors raised while turning a job description into a batch script
"""

from typing import Optional


class JobgenError(Exception):
    """Base class for all job generation errors"""


class ConfigurationError(JobgenError, ValueError):
    """Malformed or invalid job description"""


class UnsupportedBatchSystemError(JobgenError, ValueError):
    """Requested or detected batch system has no script strategy"""

    def __init__(self, requested: str, message: Optional[str] = None):
        self.requested = requested
        super().__init__(message or f"batch system is not supported: {requested}")


class TemplateSubstitutionError(JobgenError):
    """A directive or task line template could not be rendered"""

    def __init__(self, segment: str, template: str, reason: str):
        self.segment = segment
        self.template = template
        super().__init__(f"{segment} template {template!r}: {reason}")
