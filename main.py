from contextlib import asynccontextmanager

import redis.asyncio as redis
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from starlette.requests import HTTPConnection
from loguru import logger
from strawberry.fastapi import GraphQLRouter
from strawberry.subscriptions import GRAPHQL_TRANSPORT_WS_PROTOCOL, GRAPHQL_WS_PROTOCOL

# Load environment variables before settings are read
load_dotenv()

from config.settings import settings
from config.seed_config import load_seed_config, apply_seed
from staff_gateway.staff_store import StaffStore
from staff_gateway.staff_controller import StaffController
from staff_gateway.api.data_loaders import StaffLoaders
from staff_gateway.api import schema

EMPLOYEE_BY_NAME_DOCUMENT = """
query EmployeeByName($employeeName: String!) {
  employeeByName(employeeName: $employeeName) {
    id, name, salary
  }
}
"""

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize Redis connection
    app.state.redis = redis.Redis(
        host=settings.redis_host,
        port=settings.redis_port,
        decode_responses=True
    )
    await app.state.redis.ping()
    logger.info("Connected to Redis at {}:{}", settings.redis_host, settings.redis_port)

    app.state.staff_store = StaffStore(app.state.redis)
    app.state.staff_controller = StaffController(app.state.staff_store)

    try:
        if settings.seed_file:
            await apply_seed(app.state.staff_store, load_seed_config(settings.seed_file))
        yield
    finally:
        await app.state.redis.aclose()
        logger.info("Redis connection closed")

async def get_context(request: HTTPConnection) -> dict:
    # Loaders are per request so batches and caches never leak between requests
    return {
        "request": request,
        "staff_controller": request.app.state.staff_controller,
        "loaders": StaffLoaders(request.app.state.staff_store),
        "stream_delay": settings.stream_delay_seconds,
    }

graphql_app = GraphQLRouter(
    schema,
    context_getter=get_context,
    subscription_protocols=[GRAPHQL_TRANSPORT_WS_PROTOCOL, GRAPHQL_WS_PROTOCOL],
)

app = FastAPI(lifespan=lifespan)
app.include_router(graphql_app, prefix="/graphql")

@app.get("/employeeByName")
async def employee_by_name(request: Request, name: str = "devproblems") -> list[dict]:
    """Run the employeeByName query against the local schema and return plain JSON."""
    result = await schema.execute(
        EMPLOYEE_BY_NAME_DOCUMENT,
        variable_values={"employeeName": name},
        context_value=await get_context(request),
    )
    if result.errors:
        raise HTTPException(status_code=502, detail=[error.message for error in result.errors])
    return result.data["employeeByName"]

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.reload)
