"""
Around the Table: standings and payouts for a weekly NFL underdog league.
"""

__version__ = "1.0.0"
