from sqlmodel import SQLModel, Session, create_engine
from gymbooking.configuration.config import Config

# SQLite needs this to share a connection across FastAPI worker threads
connect_args = {"check_same_thread": False} if Config.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    Config.DATABASE_URL,
    echo=Config.DATABASE_ECHO,
    connect_args=connect_args,
)

def create_db_and_tables():
    """Create every table registered on SQLModel metadata"""
    # Registers the table models on the metadata
    import gymbooking.models.mod_tables  # noqa: F401
    SQLModel.metadata.create_all(engine)

def get_session():
    """Dependency: one session per request"""
    with Session(engine) as session:
        yield session
