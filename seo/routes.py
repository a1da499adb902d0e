import logging
from enum import Enum
from typing import Union


logger = logging.getLogger(__name__)


class RouteId(Enum):
    """The closed set of page routes the blog renders, keyed by route pattern."""

    HOME = "/"
    ARCHIVE = "/archive"
    PAGE = "/page/[page]"
    CATEGORY = "/category/[category]"
    CATEGORY_PAGE = "/category/[category]/page/[page]"
    TAG = "/tag/[tag]"
    TAG_PAGE = "/tag/[tag]/page/[page]"
    SEARCH = "/search"
    SEARCH_KEYWORD = "/search/[keyword]"
    SEARCH_KEYWORD_PAGE = "/search/[keyword]/page/[page]"
    NOT_FOUND = "/404"
    TAG_INDEX = "/tag"
    CATEGORY_INDEX = "/category"
    # Anything else is a post or standalone page rendered from its slug.
    POST_DETAIL = "/[prefix]/[slug]"

    @classmethod
    def from_pattern(cls, route: Union["RouteId", str, None]) -> "RouteId":
        if isinstance(route, RouteId):
            return route
        try:
            return cls(route)
        except ValueError:
            logger.debug("Route %r treated as a post detail page.", route)
            return cls.POST_DETAIL


__all__ = ["RouteId"]
