"""
Common Layer - Shared Exceptions and Utilities
==============================================

Structure:
    common/
    ├── exceptions.py   # Failure taxonomy shared by every layer
    └── utils/          # Utility functions
"""
