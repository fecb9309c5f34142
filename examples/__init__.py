# examples/__init__.py
"""
featuredemo examples package.

Scripts showing how to call the featuredemo helpers from your own code.
These are examples for learning, not tests for verification.

Available examples:
- basic_example.py: using each helper directly, outside the demo runner
"""
