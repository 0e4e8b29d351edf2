from api.routes.cache import CacheController
from api.routes.stats import ProfileController, StatsController

__all__ = ["CacheController", "ProfileController", "StatsController"]
