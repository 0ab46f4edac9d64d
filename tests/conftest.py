import pytest
from core.setup import Base, database


@pytest.fixture(autouse=True)
def db(tmp_path):
    """Point the database singleton at a fresh file for every test."""
    database.configure(f"sqlite:///{(tmp_path / 'school.db').as_posix()}")
    database.create_all()
    yield database
    Base.metadata.drop_all(bind=database.get_engine)
    database.get_engine.dispose()
