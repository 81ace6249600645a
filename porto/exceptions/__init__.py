"""
Exceptions Package
Framework exception hierarchy
"""
from porto.exceptions.custom import (
    FrameworkException,
    MissingContainerException,
    ClassDoesNotExistException,
    InvalidCallerStyleException,
    BindingResolutionException,
)

__all__ = [
    'FrameworkException',
    'MissingContainerException',
    'ClassDoesNotExistException',
    'InvalidCallerStyleException',
    'BindingResolutionException',
]
