# jobboard/db/checkdb.py

import logging
import sys
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import OperationalError, SQLAlchemyError  # Import specific exceptions

from jobboard.core.config import settings
from jobboard.db.database import build_engine

logger = logging.getLogger(__name__)


def verify_database_connection(database_url: Optional[str] = None) -> bool:
    """
    Connects to the configured database and runs SELECT 1.
    Returns True when the database answered.
    """
    db_url = database_url or settings.DATABASE_URL
    if not db_url:
        logger.error("DATABASE_URL is not set. Add it to your .env file or environment.")
        return False

    engine = None
    try:
        masked_url = make_url(db_url).render_as_string(hide_password=True)
        logger.info(f"Using Database URL: {masked_url}")

        engine = build_engine(db_url)
        # The 'with' statement closes the connection automatically
        with engine.connect() as connection:
            result = connection.execute(text("SELECT 1")).scalar()
            logger.info(f"Simple query successful! (Result: {result})")
        return True

    except ImportError as import_e:
        # Missing driver, e.g. psycopg2 for postgresql URLs
        logger.error(f"Missing database driver: {import_e}")
        return False

    except OperationalError as op_e:
        # Wrong host/port, server down, firewall, database missing
        logger.error(f"Could not connect to the database: {op_e}")
        return False

    except SQLAlchemyError as e:
        # Authentication, URL format
        logger.error(f"An SQLAlchemy error occurred during connection: {e}")
        return False

    finally:
        if engine:
            engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    if verify_database_connection():
        logger.info("Database connection appears to be working.")
        sys.exit(0)
    else:
        logger.error("Database connection verification failed.")
        sys.exit(1)
