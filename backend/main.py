from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from intakeoff.config import configure_logging

# ensure DI bootstrap
from intakeoff.core.bootstrap import container
from intakeoff.core.interfaces.config_service import IConfigurationService

# Import routers
from backend.routers.health import router as health_router
from backend.routers.patients import router as patients_router
from backend.routers.prompts import router as prompts_router

config = container.resolve(IConfigurationService)
configure_logging(config.get("debug_mode"))

logger = logging.getLogger("intakeoff")

app = FastAPI(title="InTakeOff API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get("cors_origins", []),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(patients_router)
app.include_router(prompts_router)


def run() -> None:
    import uvicorn

    port = config.get("port", 3001)
    logger.info("InTakeOff API server running on port %d", port)
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    run()
