"""Covariance and correlation matrices."""
