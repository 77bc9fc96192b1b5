from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookql.api.routes import router
from bookql.core.constants import API_VERSION, CORS_ORIGINS
from bookql.engine import BookStore, QueryExecutor, default_store


def create_app(store: Optional[BookStore] = None) -> FastAPI:
    """Build the API around one read-only store."""
    app = FastAPI(title="BookQL API", version=API_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.executor = QueryExecutor(store if store is not None else default_store())

    @app.get("/")
    def root():
        return {"status": "BookQL API is running", "version": API_VERSION}

    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    from bookql.core.constants import SERVER_HOST, SERVER_PORT
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
