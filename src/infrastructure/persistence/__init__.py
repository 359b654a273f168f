"""SQLAlchemy persistence for communities, posts and subscribers."""
