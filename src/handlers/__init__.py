"""
Lambda handlers package for AWS Lambda functions.
"""
from .daily_plan import handler

__all__ = ["handler"]
