"""Phase engine, zodiac classifier and vectorized series."""
