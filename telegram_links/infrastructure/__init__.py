"""Infrastructure — database session management, the SQL link repository, logging setup."""
