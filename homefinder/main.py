from fastapi import FastAPI
from homefinder.api.routes import router as api_router
from homefinder.services import get_session
from homefinder.utils import logger

# create FastAPI instance
app = FastAPI(title="homefinder")
app.include_router(api_router)


@app.on_event("startup")
def on_startup_load_catalog():
    # Build the session (and load the catalog) before the first request
    session = get_session()
    logger.info("Serving %d listings", len(session.catalog))
