"""Paper Share API.

Research-paper sharing service with relationship-based read authorization.
"""
