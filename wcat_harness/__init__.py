"""Differential conformance testing of wcat against the reference cat."""

__version__ = "0.1.0"
