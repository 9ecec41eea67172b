"""Adaptive quiz generation and grading."""
