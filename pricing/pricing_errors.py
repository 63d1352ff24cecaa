"""Pricing errors and error message constants."""

from typing import List


class errmsg:
    """Error message constants for the pricing tool."""

    DUPLICATE_CAMPAIGN_CATEGORY = "Only one {category} campaign is allowed"
    INVALID_INPUT_SHAPE = "Cart file does not match the expected shape"
    CART_FILE_NOT_FOUND = "Cart file not found: {path}"
    CART_FILE_UNREADABLE = "Cannot read cart file {path}: {reason}"
    INVALID_EXTENSION = "Expected a {extension} file path, got {path}"
    INVALID_JSON = "Cart file is not valid JSON ({path}): {reason}"


class PricingError(Exception):
    """Base class for every known pricing failure."""


class DuplicateCampaignCategory(PricingError):
    """More than one campaign was supplied for the same category."""

    def __init__(self, category) -> None:
        self.category = category
        label = getattr(category, "value", category)
        super().__init__(errmsg.DUPLICATE_CAMPAIGN_CATEGORY.format(category=label))


class InvalidInputShape(PricingError):
    """A line item or campaign failed schema validation."""

    def __init__(self, problems: List[str]) -> None:
        self.problems = list(problems)
        lines = [errmsg.INVALID_INPUT_SHAPE] + [f"  - {p}" for p in self.problems]
        super().__init__("\n".join(lines))


class CartFileNotFound(PricingError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(errmsg.CART_FILE_NOT_FOUND.format(path=path))


class CartFileUnreadable(PricingError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(errmsg.CART_FILE_UNREADABLE.format(path=path, reason=reason))


class InvalidExtension(PricingError):
    def __init__(self, path: str, extension: str) -> None:
        self.path = path
        self.extension = extension
        super().__init__(errmsg.INVALID_EXTENSION.format(path=path, extension=extension))


class InvalidJson(PricingError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(errmsg.INVALID_JSON.format(path=path, reason=reason))
