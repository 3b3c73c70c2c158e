"""SQLAlchemy persistence for the SQL-backed currency cache."""
