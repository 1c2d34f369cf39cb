"""Unit tests for StrategySelector."""

import pytest

from fulfillment.domain.exceptions import UnsupportedProductTypeError
from fulfillment.domain.model.product import ProductType
from fulfillment.domain.service.product_strategies import (
    ExpirableProductStrategy,
    NormalProductStrategy,
    SeasonalProductStrategy,
)
from fulfillment.domain.service.strategy_selector import StrategySelector
from tests.fakes import RecordingNotificationService


@pytest.fixture
def selector():
    return StrategySelector(RecordingNotificationService())


class TestStrategySelector:

    @pytest.mark.parametrize(
        ("product_type", "expected"),
        [
            (ProductType.NORMAL, NormalProductStrategy),
            (ProductType.SEASONAL, SeasonalProductStrategy),
            (ProductType.EXPIRABLE, ExpirableProductStrategy),
        ],
    )
    def test_selects_strategy_for_each_type(self, selector, product_type, expected):
        assert isinstance(selector.select(product_type), expected)

    def test_accepts_raw_tag(self, selector):
        assert isinstance(selector.select("SEASONAL"), SeasonalProductStrategy)

    @pytest.mark.parametrize("tag", ["DIGITAL", "normal", "", None])
    def test_unknown_tag_rejected(self, selector, tag):
        with pytest.raises(UnsupportedProductTypeError, match="Unknown product type"):
            selector.select(tag)

    def test_repeated_calls_are_independent(self, selector):
        first = selector.select(ProductType.NORMAL)
        second = selector.select(ProductType.NORMAL)
        assert type(first) is type(second)
