# database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from dotenv import load_dotenv

from config import settings

# Load environment variables from .env file
load_dotenv()

# --- Database Configuration ---
DATABASE_URL = settings.database_url

# SQLite needs the same-thread check disabled so FastAPI's threadpool can share connections.
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

if connect_args:
    engine = create_engine(DATABASE_URL, connect_args=connect_args)
else:
    engine = create_engine(
        DATABASE_URL,
        pool_size=10,
        max_overflow=20,
        pool_recycle=3600, # seconds; server databases drop idle connections
        pool_pre_ping=True,
    )

# Create a SessionLocal class for creating new Session objects
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create a Base class for declarative models
Base = declarative_base()

# --- Dependency for FastAPI ---
def get_db():
    """
    FastAPI dependency that provides a database session per request.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
