"""
Custom Exception Classes
Framework-specific exceptions raised by the caller and the container
"""
from typing import Optional


class FrameworkException(Exception):
    """Base exception for all framework exceptions"""
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.__class__.message
        super().__init__(self.message)


class MissingContainerException(FrameworkException):
    """
    Container directory not found

    Raised when "Container@ClassName" names a container that has no
    directory under <app_path>/containers

    Example:
        raise MissingContainerException("Container (Ghost) is not installed.")
    """
    message = "Container is not installed."


class ClassDoesNotExistException(FrameworkException):
    """
    Class not loadable

    Raised when the class path built from "Container@ClassName" cannot be imported

    Example:
        raise ClassDoesNotExistException(
            "Class (app.containers.User.Actions.RegisterUserAction) is not installed."
        )
    """
    message = "Class is not installed."


class InvalidCallerStyleException(FrameworkException):
    """
    Malformed caller identifier

    Raised when an identifier uses the separator but does not split into
    exactly one container and one class name

    Example:
        raise InvalidCallerStyleException("Invalid caller style (User@@Action).")
    """
    message = "Invalid caller style."


class BindingResolutionException(FrameworkException):
    """
    Container binding cannot be resolved

    Raised by Application.make() when a key is neither bound nor a loadable class path
    """
    message = "Binding could not be resolved."
