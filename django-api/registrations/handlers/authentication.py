"""Bearer token authentication.

A request is authenticated when its ``Authorization: Bearer <key>`` header
carries the key of an issued token. Anything else is answered with 401.
"""

from rest_framework.authentication import TokenAuthentication


class BearerTokenAuthentication(TokenAuthentication):
    """Token authentication using the ``Bearer`` keyword."""

    keyword = "Bearer"
