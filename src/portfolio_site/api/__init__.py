"""HTTP layer for the portfolio site."""
