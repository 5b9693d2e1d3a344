"""HTTP errors raised by routes

Carry the use case Error through to the app-level exception handlers.
"""

from fastapi import status

from invoicing.libs.result import Error


class ClientError(Exception):
    """4xx response built from a use case Error"""

    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code


class ServerError(ClientError):
    """5xx response; the reason is logged and echoed as Detail"""

    def __init__(self, error: Error, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(error, status_code=status_code)
