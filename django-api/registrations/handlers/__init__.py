from registrations.handlers.authentication import BearerTokenAuthentication

__all__ = ["BearerTokenAuthentication"]
