"""AutoHandel Database Module.

PostgreSQL connection pool behind the primary key-value backend. Nothing here
runs unless DATABASE_URL is set; without it every storage operation goes to
the local fallback store.
"""
import logging
import threading
from contextlib import contextmanager

import psycopg2
from psycopg2 import pool
from psycopg2.extras import RealDictCursor

from config import get_config

logger = logging.getLogger('autohandel.database')

CONNECT_ATTEMPTS = 3

_connection_pool = None
_pool_lock = threading.Lock()


def _create_pool(config):
    if not config.DATABASE_URL:
        raise RuntimeError('DATABASE_URL is not configured')
    created = pool.ThreadedConnectionPool(
        minconn=config.DB_POOL_MIN_CONN,
        maxconn=config.DB_POOL_MAX_CONN,
        dsn=config.DATABASE_URL,
        connect_timeout=5,
        keepalives=1,
        keepalives_idle=30,
    )
    logger.info(f'kv_store pool ready ({config.DB_POOL_MIN_CONN}-{config.DB_POOL_MAX_CONN} connections)')
    return created


def _get_pool():
    global _connection_pool
    if _connection_pool is None:
        with _pool_lock:
            if _connection_pool is None:
                _connection_pool = _create_pool(get_config())
    return _connection_pool


def _is_alive(conn) -> bool:
    try:
        with conn.cursor() as cur:
            cur.execute('SELECT 1')
        conn.rollback()
        return True
    except (psycopg2.OperationalError, psycopg2.InterfaceError) as e:
        logger.warning(f'Dropping dead connection: {e}')
        return False


def get_db():
    """Borrow a live autocommit connection from the pool.

    Dead connections (server restart, idle timeout) are closed and replaced;
    gives up after CONNECT_ATTEMPTS tries.
    """
    connections = _get_pool()
    for _ in range(CONNECT_ATTEMPTS):
        conn = connections.getconn()
        if _is_alive(conn):
            conn.autocommit = True
            return conn
        connections.putconn(conn, close=True)
    raise psycopg2.OperationalError(f'No live database connection after {CONNECT_ATTEMPTS} attempts')


def release_db(conn):
    """Hand a borrowed connection back to the pool."""
    if conn is None or _connection_pool is None:
        return
    if conn.closed:
        _connection_pool.putconn(conn, close=True)
    else:
        conn.autocommit = False
        _connection_pool.putconn(conn)


@contextmanager
def get_db_connection():
    conn = get_db()
    try:
        yield conn
    finally:
        release_db(conn)


def get_cursor(conn):
    """Cursor returning rows as dicts."""
    return conn.cursor(cursor_factory=RealDictCursor)


def init_kv_table():
    """Create the ``kv_store`` table if it does not exist yet."""
    with get_db_connection() as conn:
        get_cursor(conn).execute('''
            CREATE TABLE IF NOT EXISTS kv_store (
                key TEXT PRIMARY KEY,
                value JSONB NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        ''')
    logger.info('kv_store table ready')
