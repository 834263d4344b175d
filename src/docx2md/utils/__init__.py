#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docx2md/utils/__init__.py
"""Utility helpers for docx2md."""
