class ServiceException(Exception):
    """Base exception for service operation errors."""
    pass

class ResourceNotFoundException(ServiceException):
    """Raised when a requested resource is not found."""
    pass

class DatabaseException(ServiceException):
    """Raised when the database rejects an operation because of a constraint."""
    pass
