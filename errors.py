class AICommitError(Exception):
    """Base class for aicommit exceptions."""

    def __init__(self, message, hint=None):
        self.message = message
        self.hint = hint
        super().__init__(message)


class ConfigurationError(AICommitError):
    """Exception for invalid configuration values."""
    pass


class MissingDependencyError(AICommitError):
    """Raised when a required executable is not on PATH."""

    def __init__(self, tool, message=None):
        self.tool = tool
        hint = (
            "You can typically install it using your package manager, for instance:\n"
            f"    sudo apt-get install {tool}    # Ubuntu\n"
            f"    brew install {tool}            # macOS"
        )
        super().__init__(message or f"The {tool} utility is not installed. Please install it to proceed.", hint)


class MissingCredentialError(AICommitError):
    """Raised when the API key is absent from the environment."""

    def __init__(self, env_var, message=None):
        self.env_var = env_var
        hint = (
            "Please add it to your environment variables.\n"
            "You can add it to your .bashrc or .bash_profile like so:\n"
            f"    export {env_var}=your_api_key_here"
        )
        super().__init__(message or f"The {env_var} is not present in the environment.", hint)


class DiffError(AICommitError):
    """Raised when git cannot produce a diff."""
    pass


class ApiConnectionError(AICommitError):
    """Transport failure talking to the completion endpoint."""

    def __init__(self, message):
        super().__init__(message, "Please check your internet connection and API key.")


class ApiError(AICommitError):
    """The completion endpoint answered with an error status."""

    def __init__(self, message, status_code=None):
        self.status_code = status_code
        super().__init__(message)


class ResponseFormatError(AICommitError):
    """The response body does not carry a commit message."""
    pass
