from typing import Any, Optional
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from config.setting import settings


class DatabaseSetup:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(DatabaseSetup, cls).__new__(cls)
            cls._instance._base = declarative_base()
            cls._instance._engine = None
            cls._instance._initialize()
        return cls._instance

    def _initialize(self, database_url: Optional[str] = None) -> None:
        """Construct an engine and session factory for the given url"""
        engine_kwargs = {
            "pool_pre_ping": True,
            "echo": settings.SQL_ECHO,
        }

        url = database_url or settings.DATABASE_URL
        if url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}

        self._url = url
        self._engine = create_engine(url, **engine_kwargs)
        self._session_maker = sessionmaker(
            bind=self._engine, autoflush=False, expire_on_commit=False
        )

    def configure(self, database_url: str) -> None:
        """Rebind the engine and session factory to another database"""
        if self._engine is not None:
            self._engine.dispose()
        self._initialize(database_url)

    def create_all(self) -> None:
        """Create every table registered on Base if it is missing"""
        import model  # noqa: F401

        self._base.metadata.create_all(bind=self._engine)

    def get_session(self) -> sessionmaker:
        """Grant session

            This method returns the database
            session factory
        Returns:
            object: database session factory
        """
        return self._session_maker

    @property
    def get_base(self) -> Any:
        """Grant Base

            This method returns the
            database Base
        Returns:
            object: database base
        """
        return self._base

    @property
    def get_engine(self) -> Any:
        """Grant engine
            This method returns the
            database engine

        Returns:
            object: database engine
        """
        return self._engine

    @property
    def url(self) -> str:
        return self._url


database = DatabaseSetup()
Base = database.get_base
