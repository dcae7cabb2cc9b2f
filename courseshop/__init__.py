"""Course shopping cart, receipts with IGV tax, and client, user and status records."""

__version__ = "1.0.0"