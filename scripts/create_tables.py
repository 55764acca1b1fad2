"""Create all database tables (local development; use alembic elsewhere)"""
import logging
from weddingsite.db.session import engine
# Importing the models package registers every table with Base.metadata
from weddingsite.models import Base

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def create_tables():
    logger.info("Creating all database tables on %s...", engine.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=engine)
    logger.info("All tables created successfully!")

if __name__ == "__main__":
    create_tables()
