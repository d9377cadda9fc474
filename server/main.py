# server/main.py

import logging
import os
import sys
from dotenv import load_dotenv
from fastapi import FastAPI
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from api import auth
from database import init_db, get_db_url


load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


try:
    init_db()
except SQLAlchemyError:
    logger.critical(
        "could not open the user store at %s",
        make_url(get_db_url()).render_as_string(hide_password=True),
        exc_info=True,
    )
    sys.exit(1)

logger.info("Successfully connected")

app = FastAPI(title="User Accounts API")

app.include_router(auth.router)


@app.get("/health")
def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8080")))
