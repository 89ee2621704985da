"""Database engine utilities for SQL bootstrap imports.

This module centralizes database connectivity primitives so all SQLAlchemy
engine construction stays inside the db package.
"""

from typing import Final

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import URL, make_url

_JDBC_DRIVER_SCHEMES: Final[dict[str, str]] = {
    "jdbc:mysql://": "mysql+pymysql://",
    "jdbc:mariadb://": "mariadb+pymysql://",
}


def db_translate_jdbc_url(database_url: str) -> str:
    """Translate a JDBC connection string into a SQLAlchemy URL string.

    Query parameters of JDBC URLs are driver-specific and are dropped. Values
    that are not JDBC URLs are returned unchanged.

    Args:
        database_url: JDBC or SQLAlchemy database URL.

    Returns:
        str: SQLAlchemy URL string.

    Raises:
        ValueError: Raised when the database URL is blank.
    """

    normalized_url = database_url.strip()
    if not normalized_url:
        raise ValueError("database_url must not be blank")

    for jdbc_prefix, sqlalchemy_prefix in _JDBC_DRIVER_SCHEMES.items():
        if normalized_url.lower().startswith(jdbc_prefix):
            remainder = normalized_url[len(jdbc_prefix) :].split("?", 1)[0]
            return f"{sqlalchemy_prefix}{remainder}"
    return normalized_url


def db_build_url(database_url: str, user: str | None = None, password: str | None = None) -> URL:
    """Build a SQLAlchemy URL with optional credentials applied.

    Args:
        database_url: JDBC or SQLAlchemy database URL.
        user: Optional database user; blank values leave the URL untouched.
        password: Optional database password; applied only with a user.

    Returns:
        URL: SQLAlchemy URL object.

    Raises:
        ValueError: Raised when the database URL is blank or unparsable.
    """

    url = make_url(db_translate_jdbc_url(database_url))
    if user:
        url = url.set(username=user, password=password or None)
    return url


def db_create_engine(database_url: str | URL) -> Engine:
    """Create the SQLAlchemy engine for bootstrap database access.

    Args:
        database_url: SQLAlchemy database URL.

    Returns:
        Engine: Configured SQLAlchemy engine.

    Raises:
        ValueError: Raised when the database URL is blank.
    """

    if isinstance(database_url, str) and not database_url.strip():
        raise ValueError("database_url must not be blank")

    return create_engine(database_url, pool_pre_ping=True)
