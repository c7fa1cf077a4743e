"""
Database Configuration and Management (SQLAlchemy)

Handles engine setup, sessions, initialization and backups.
"""

import shutil
import logging
from pathlib import Path
from datetime import datetime
from sqlalchemy import create_engine, select, func
from sqlalchemy.orm import sessionmaker
from config.models import Base, Reminder
from config.settings import DATA_DIR, BASE_DIR, load_settings

logger = logging.getLogger(__name__)

BACKUP_DIR = BASE_DIR / "backups"

engine = None
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False)


def configure_database(database_url=None):
    """
    Bind the session factory to a new engine.

    Args:
        database_url (str, optional): SQLAlchemy URL; defaults to DATABASE_URL from settings

    Returns:
        sqlalchemy.engine.Engine: The configured engine
    """
    global engine

    if database_url is None:
        database_url = load_settings()['DATABASE_URL']

    connect_args = {}
    if database_url.startswith("sqlite"):
        # Requests and the sweep scheduler run on different threads
        connect_args['check_same_thread'] = False
        if database_url == "sqlite:///" + str(DATA_DIR / "deadline_tracker.db"):
            DATA_DIR.mkdir(exist_ok=True)

    if engine is not None:
        engine.dispose()

    engine = create_engine(database_url, echo=False, connect_args=connect_args)
    SessionLocal.configure(bind=engine)
    logger.info(f"Database configured: {engine.url.render_as_string(hide_password=True)}")
    return engine


def get_db_session():
    """
    Get a new database session.

    Returns:
        sqlalchemy.orm.Session: Database session
    """
    if engine is None:
        configure_database()
    return SessionLocal()


def init_database():
    """
    Create all tables defined in models.
    """
    if engine is None:
        configure_database()

    logger.info("Initializing database...")
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database initialized successfully!")
    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        raise


def count_reminders():
    """
    Count every stored reminder.
    """
    session = get_db_session()
    try:
        return session.execute(select(func.count()).select_from(Reminder)).scalar_one()
    finally:
        session.close()


def backup_database():
    """
    Create a backup of a file-based SQLite database.

    Returns:
        str or None: Path of the backup file
    """
    if engine is None:
        configure_database()

    url = engine.url
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        logger.warning("Backups are only supported for file-based SQLite databases")
        return None

    db_path = Path(url.database)
    if not db_path.exists():
        logger.warning("Database file does not exist, cannot create backup")
        return None

    BACKUP_DIR.mkdir(exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    backup_path = BACKUP_DIR / f"deadline_tracker_backup_{timestamp}.db"

    try:
        shutil.copy2(db_path, backup_path)
        logger.info(f"Database backed up to: {backup_path}")
        return str(backup_path)
    except OSError as e:
        logger.error(f"Error creating backup: {e}")
        return None
