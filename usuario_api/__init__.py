"""User accounts with owned addresses and phones behind a token-scoped API."""
