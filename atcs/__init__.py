"""
ATCS package: intersection model, green-time policy, arrivals and statistics.
"""
