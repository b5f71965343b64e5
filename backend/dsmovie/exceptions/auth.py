class AuthException(Exception):
    """Base exception for authentication errors"""
    pass

class UsernameNotFoundException(AuthException):
    """Raised when the current principal or a username cannot be resolved to a user"""
    pass

class InvalidCredentialsException(AuthException):
    """Raised when login credentials are invalid"""
    pass

class InvalidTokenException(AuthException):
    """Raised when a bearer token is missing, expired or malformed"""
    pass

class ForbiddenException(AuthException):
    """Raised when the authenticated user lacks a required role"""
    pass
