"""Structure lint rules."""
