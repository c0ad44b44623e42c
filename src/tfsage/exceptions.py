"""Custom exceptions for tfsage CLI tool.

This module defines a hierarchy of custom exceptions for better error
categorization and handling throughout the application.
"""


class SageError(Exception):
    """Base exception for all tfsage errors.

    Parameters
    ----------
    message : str
        Error message describing what went wrong.
    details : dict, optional
        Additional structured information about the error.

    Attributes
    ----------
    message : str
        The error message.
    details : dict
        Dictionary containing additional error context.
    """

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        """Format error message with optional details.

        Returns
        -------
        str
            Formatted error message.
        """
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class SageIOError(SageError):
    """Filesystem operation error.

    Raised when:
    - A directory cannot be listed
    - A template cannot be read
    - A generated module cannot be written or deleted

    Parameters
    ----------
    message : str
        Error message describing the failed operation.
    path : str, optional
        Path involved in the failed operation.

    Attributes
    ----------
    path : str or None
        Path involved in the failed operation.
    """

    def __init__(self, message: str, path: str = None):
        details = {}
        if path is not None:
            details["path"] = str(path)

        super().__init__(message, details)
        self.path = path


class InvalidConfigError(SageError):
    """Requested configuration does not exist under configs/."""

    pass


class TemplateRenderError(SageError):
    """Template could not be rendered.

    Parameters
    ----------
    message : str
        Error message from the template engine.
    filename : str, optional
        Output file that was being produced.
    """

    def __init__(self, message: str, filename: str = None):
        details = {}
        if filename is not None:
            details["file"] = str(filename)

        super().__init__(message, details)
        self.filename = filename


class TerraformError(SageError):
    """Terraform process could not be spawned or managed.

    Parameters
    ----------
    message : str
        Error message describing the failure.
    command : str, optional
        Terraform subcommand that failed.
    """

    def __init__(self, message: str, command: str = None):
        details = {}
        if command:
            details["command"] = command

        super().__init__(message, details)
        self.command = command


class ConfigError(SageError):
    """Tool settings loading error.

    Raised when:
    - A settings file contains invalid YAML
    - A settings file does not contain a mapping
    """

    pass
