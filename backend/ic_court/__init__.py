"""Information Commission case management backend."""
