"""Services backing the compile server routes."""
