"""User and document service layer."""
