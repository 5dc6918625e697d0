from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from apis import boards, projects, tasks, comments
from apis.errors import install_error_handlers
from database import Store
from settings import ENVIRONMENT, CORS_ALLOW_ORIGINS


def create_app(store: Optional[Store] = None) -> FastAPI:
    """Build the API around a store; a freshly seeded one by default."""
    app = FastAPI(
        title="Nebula Boards API",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.store = store if store is not None else Store()

    # The board UI runs on another origin
    if ENVIRONMENT == "development":
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=CORS_ALLOW_ORIGINS,
            allow_methods=["GET", "POST", "PATCH", "DELETE"],
            allow_headers=["*"],
        )

    install_error_handlers(app)

    app.include_router(boards.router)
    app.include_router(projects.router)
    app.include_router(tasks.router)
    app.include_router(comments.router)

    @app.get("/health")
    async def health():
        """API health check."""
        return {"message": "Nebula Boards API is running"}

    return app


app = create_app()
