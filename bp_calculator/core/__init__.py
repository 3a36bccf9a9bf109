"""
Core decision logic.
"""
