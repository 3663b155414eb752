"""Testing lint rules."""
