"""Integrity lock for Terraform registry modules."""

__version__ = "0.1.0"
