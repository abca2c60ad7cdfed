"""
Core domain models, rounding engine, numeric dispatch and contracts.

This module contains the foundational building blocks that are independent
of any particular number string convention.
"""
