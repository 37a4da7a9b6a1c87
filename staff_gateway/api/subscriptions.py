"""
GraphQL Subscription resolvers for Staff Gateway.

Streams a paced snapshot of employees to the subscriber.
"""

import strawberry
from contextlib import aclosing
from typing import TYPE_CHECKING, AsyncGenerator

from graphql import GraphQLError
from loguru import logger

from .types import Employee
from staff_gateway.errors import StaffGatewayError

if TYPE_CHECKING:
    from staff_gateway.staff_controller import StaffController


@strawberry.type
class Subscription:
    """GraphQL Subscription root"""

    @strawberry.subscription
    async def all_employee(self, info: strawberry.types.Info) -> AsyncGenerator[Employee, None]:
        """
        Subscribe to every employee, one at a time.

        Yields:
            Employees in id order, each after the configured stream delay
        """
        staff_controller: StaffController = info.context["staff_controller"]
        logger.info("allEmployee subscription started")

        # Close the inner stream as soon as the client goes away
        try:
            async with aclosing(staff_controller.stream_employees(info.context["stream_delay"])) as employees:
                async for employee in employees:
                    yield employee
        except StaffGatewayError as e:
            # Subscription results bypass ErrorCodeExtension, so attach the code here
            raise GraphQLError(e.message, extensions={"code": e.code}, original_error=e) from e
        finally:
            logger.info("allEmployee subscription ended")
