import logging
from contextlib import contextmanager

from sqlmodel import SQLModel, create_engine, Session
from app.config import settings

logger = logging.getLogger(__name__)

engine = create_engine(
    settings.database_url,
    echo=False,
    pool_pre_ping=True,      # checks dead connections
    pool_recycle=1800        # refresh every 30 min
)


def create_db_and_tables():
    from app.models import user, product, order, order_item
    SQLModel.metadata.create_all(engine)


def get_session():
    with Session(engine) as session:
        yield session


@contextmanager
def transaction(session: Session):
    """
    Unit of work over an open session.

    Commits when the block exits normally and rolls back on any exception,
    re-raising it. Either way the session hands its connection back to the pool.
    """
    try:
        yield session
        session.commit()
    except Exception:
        logger.warning("Rolling back transaction")
        session.rollback()
        raise
