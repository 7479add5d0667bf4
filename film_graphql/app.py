from contextlib import asynccontextmanager

from fastapi import FastAPI

from film_graphql.infrastructure.logging.logger import setup_logging
from film_graphql.infrastructure.persistence.database import dispose_engine, get_engine, set_engine
from film_graphql.presentation.routers import graphql

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = get_engine()
    set_engine(engine)
    try:
        yield
    finally:
        await dispose_engine()


app = FastAPI(title="Film GraphQL API", lifespan=lifespan)

app.include_router(graphql.router)
