"""Alignment engines: the scoring model and the dynamic programming aligners."""
