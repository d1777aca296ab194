"""FastAPI app: /, /health, /normalize."""

from deps import CORSMiddleware, FastAPI

from .config import get_host, get_port
from .routes import health_router, normalize_router, root_router
from .startup import configure_logging, validate_config

configure_logging()

app = FastAPI(
    title="Accessibility Report Normalizer API",
    description="Merges rule-engine and heuristic accessibility scan results into one scored, categorized report.",
    version="0.1.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(normalize_router)

validate_config()


def run() -> None:
    """Serve the app with uvicorn on HOST:PORT."""
    import uvicorn

    uvicorn.run(app, host=get_host(), port=get_port())


if __name__ == "__main__":
    run()
