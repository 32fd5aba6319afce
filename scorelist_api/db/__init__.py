from .repositories import DBScorelistRepository, DBTokenAuthProvider
from .session import create_session, database_url, get_engine
