"""
Core modules для dickson
"""
