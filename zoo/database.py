from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from zoo.config import get_settings


engine = create_engine(get_settings().db_url, echo=get_settings().db_echo, pool_pre_ping=True)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def create_tables(bind=engine):
    # the production schema is owned elsewhere, this is for local setups and tests
    from zoo import models  # noqa: F401
    Base.metadata.create_all(bind=bind)


# Dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
