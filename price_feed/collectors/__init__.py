"""
Price Feed - Collectors Package.

Collectors:
- coindesk: CoinDesk Bitcoin Price Index over HTTP
"""

from .coindesk import CoindeskCollector

__all__ = ["CoindeskCollector"]
