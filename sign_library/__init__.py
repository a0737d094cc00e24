"""Color-categorized image ingestion for the road-sign icon library."""

__version__ = "1.0.0"
