"""
Utilities for time stamps
"""
from datetime import datetime

def today():
    """Current local date as YYYY-MM-DD"""
    return datetime.now().strftime("%Y-%m-%d")
