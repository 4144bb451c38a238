"""
Utility scripts for inspecting punktcore output.

This package contains:
- annotate_text: print first-pass annotations for a text
"""
