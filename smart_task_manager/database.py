"""
SMART TASK MANAGER - Database Connection
=========================================
Opens a SQLite connection for the "Connect Database" menu entry.
The task store stays in memory and never touches this.
"""

from pathlib import Path
from typing import Union
import logging
import sqlite3

logger = logging.getLogger("smart_task_manager")

DEFAULT_DB_PATH = "smart_task_manager.db"


class DatabaseConnectionError(ConnectionError):
    """Raised when a database connection cannot be opened"""


class DatabaseConnection:
    """Connection factory for a single SQLite database file"""

    def __init__(self, db_path: Union[str, Path] = DEFAULT_DB_PATH):
        self.db_path = Path(db_path)

    def open_connection(self) -> sqlite3.Connection:
        """Open and check a connection; the caller must close it"""
        con = None
        try:
            con = sqlite3.connect(str(self.db_path))
            # Reads the file header, so a non-database file fails here
            con.execute("PRAGMA schema_version").fetchone()
        except sqlite3.Error as e:
            if con is not None:
                con.close()
            logger.error(f"❌ Connection to {self.db_path} failed: {e}")
            raise DatabaseConnectionError(f"Connection to {self.db_path} failed: {e}") from e

        logger.info(f"🔌 Connected to {self.db_path}")
        return con
