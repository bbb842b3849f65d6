# graphcore/cli/exceptions.py

class RegistryError(Exception):
    """Base class for command registry misuse."""
    pass


class DuplicateCommandError(RegistryError):
    """Raised when a command name is registered twice."""
    pass


class RegistryClosedError(RegistryError):
    """Raised when registering into a registry that has been closed."""
    pass
