"""Constants shared across cachetop modules."""
