"""
Schema extensions for Staff Gateway.

Logs every incoming GraphQL document and tags failures raised by the store
or controller with their error code.
"""

from loguru import logger
from strawberry.extensions import SchemaExtension

from staff_gateway.errors import StaffGatewayError


class RequestLoggingExtension(SchemaExtension):
    def on_operation(self):
        logger.info("GraphQL request {}", self.execution_context.query)
        yield


class ErrorCodeExtension(SchemaExtension):
    def on_operation(self):
        yield
        result = self.execution_context.result
        for error in getattr(result, "errors", None) or []:
            if isinstance(error.original_error, StaffGatewayError):
                error.extensions = {**(error.extensions or {}), "code": error.original_error.code}
