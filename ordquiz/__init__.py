"""HP ORD vocabulary quiz: web service, quiz client and ingestion helpers."""

__version__ = "0.1.0"
