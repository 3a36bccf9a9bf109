"""
BP Calculator - blood pressure classification and explanation service.
"""
