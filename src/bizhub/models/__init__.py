from .listing import Listing, ListingCard

__all__ = ["Listing", "ListingCard"]
