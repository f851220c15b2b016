from .geocoder import Geocoder
from .page_fetcher import PageFetcher

__all__ = ["Geocoder", "PageFetcher"]
