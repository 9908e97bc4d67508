import pytest

from robots_generator.catalog import (
    CRAWLERS,
    PLATFORM_DISALLOWS,
    STRATEGY_DESCRIPTIONS,
    CrawlerCategory,
    Platform,
    Strategy,
    crawlers_by_category,
    describe_strategy,
    disallows_for,
)

def test_catalog_has_twenty_crawlers():
    assert len(CRAWLERS) == 20
    assert len({crawler.user_agent for crawler in CRAWLERS}) == 20

def test_crawlers_by_category_keeps_catalog_order():
    search = crawlers_by_category(CrawlerCategory.SEARCH)
    assert [c.user_agent for c in search] == [
        "Googlebot", "Bingbot", "Slurp", "DuckDuckBot", "Baiduspider", "YandexBot",
    ]
    ai = crawlers_by_category("ai")
    assert ai[0].user_agent == "GPTBot"
    assert ai[-1].user_agent == "cohere-ai"
    assert len(search) + len(ai) == len(CRAWLERS)

def test_crawler_is_immutable():
    with pytest.raises(AttributeError):
        CRAWLERS[0].user_agent = "Evilbot"

def test_every_platform_and_strategy_has_an_entry():
    assert set(PLATFORM_DISALLOWS) == set(Platform)
    assert set(STRATEGY_DESCRIPTIONS) == set(Strategy)

@pytest.mark.parametrize("platform,first,count", [
    ("wordpress", "/wp-admin/", 7),
    ("shopify", "/admin/", 8),
    ("ecommerce", "/cart/", 8),
    ("custom", "/admin/", 3),
])
def test_disallows_for_accepts_string_values(platform, first, count):
    rules = disallows_for(platform)
    assert rules[0] == first
    assert len(rules) == count

def test_disallows_for_unknown_platform():
    with pytest.raises(ValueError):
        disallows_for("drupal")

def test_describe_strategy():
    assert describe_strategy("aiOnly").startswith("Allow only AI crawlers.")
    assert describe_strategy(Strategy.TRADITIONAL).startswith("Allow only traditional search engines.")

def test_choice_labels():
    assert Strategy.MAX_VISIBILITY.label == "Maximum Visibility (Recommended)"
    assert Platform.ECOMMERCE.label == "eCommerce (General)"
