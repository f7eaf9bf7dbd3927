"""Quora-style question and answer service."""
