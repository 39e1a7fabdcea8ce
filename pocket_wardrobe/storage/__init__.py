"""In-memory wardrobe storage."""

from .catalog import Catalog
from .outfits import OutfitStore
from .seed import SAMPLE_DATA, SeedData, load_seed, parse_seed

__all__ = ["Catalog", "OutfitStore", "SeedData", "SAMPLE_DATA", "load_seed", "parse_seed"]
