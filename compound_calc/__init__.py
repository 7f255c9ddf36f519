"""Compound interest projection backend."""
