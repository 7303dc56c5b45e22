"""
faucet-tracker - Faucet catalog service

A FastAPI-based application that lists verified faucet sites and
accepts public submissions of new faucets for manual review.
"""

__version__ = "1.0.0"

__all__ = []
