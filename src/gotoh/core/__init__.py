"""Core data types: symbol alphabets."""
