class RepositoryException(Exception):
    """Base exception for all repository-related errors."""
    pass

class EntityNotFoundException(RepositoryException):
    """Raised when an entity loaded by reference cannot be found in the repository."""
    pass

class IntegrityViolationException(RepositoryException):
    """Raised when a write or delete would break a referential integrity constraint."""
    pass

class InvalidEntityDataException(RepositoryException):
    """Raised when entity data is invalid or malformed."""
    pass

class RepositoryOperationException(RepositoryException):
    """Raised when a repository operation fails for any reason not covered by other exceptions."""
    pass
