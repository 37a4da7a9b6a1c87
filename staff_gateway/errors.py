"""
Typed failures raised by the store and controller.

Each failure carries a stable ``code`` that the GraphQL layer copies into
the error ``extensions`` so clients can tell them apart.
"""


class StaffGatewayError(Exception):
    code = "INTERNAL"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(StaffGatewayError):
    """Referenced record id does not exist"""
    code = "NOT_FOUND"


class ValidationError(StaffGatewayError):
    """Malformed mutation input"""
    code = "VALIDATION_FAILED"


class UpstreamError(StaffGatewayError):
    """Persistence I/O failed"""
    code = "UPSTREAM_FAILURE"
