"""
Core domain models, geometry algorithms, and boundary contracts.

This module contains the foundational building blocks that are independent
of external systems (storage, transport, etc.).
"""
