"""
Static reference tables for the robots.txt generator.

This module holds the crawler directory, the platform-specific disallow lists
and the strategy descriptions. All tables are process-wide constants; the
order of CRAWLERS and of every disallow list is the order in which the
directives are emitted.

Typical usage:
    from robots_generator.catalog import Strategy, Platform, crawlers_by_category
"""

from dataclasses import dataclass

from django.db import models


class Strategy(models.TextChoices):
    """Crawler visibility strategy offered by the generator."""
    MAX_VISIBILITY = 'maxVisibility', 'Maximum Visibility (Recommended)'
    AI_ONLY = 'aiOnly', 'AI Visibility Only'
    TRADITIONAL = 'traditional', 'Traditional SEO Only'


class Platform(models.TextChoices):
    """Website platform template, each mapped to a list of disallowed paths."""
    CUSTOM = 'custom', 'Custom / General'
    WORDPRESS = 'wordpress', 'WordPress'
    SHOPIFY = 'shopify', 'Shopify'
    ECOMMERCE = 'ecommerce', 'eCommerce (General)'


class CrawlerCategory(models.TextChoices):
    """Category a crawler belongs to."""
    SEARCH = 'search', 'Traditional search engine'
    AI = 'ai', 'AI crawler'


@dataclass(frozen=True)
class Crawler:
    """A known crawler, identified by its User-agent token."""
    user_agent: str
    name: str
    company: str
    category: str


CRAWLERS = (
    # Traditional search engines
    Crawler('Googlebot', 'Googlebot', 'Google', CrawlerCategory.SEARCH),
    Crawler('Bingbot', 'Bingbot', 'Microsoft', CrawlerCategory.SEARCH),
    Crawler('Slurp', 'Slurp', 'Yahoo', CrawlerCategory.SEARCH),
    Crawler('DuckDuckBot', 'DuckDuckBot', 'DuckDuckGo', CrawlerCategory.SEARCH),
    Crawler('Baiduspider', 'Baiduspider', 'Baidu', CrawlerCategory.SEARCH),
    Crawler('YandexBot', 'YandexBot', 'Yandex', CrawlerCategory.SEARCH),

    # AI crawlers (citation and training)
    Crawler('GPTBot', 'GPTBot', 'OpenAI', CrawlerCategory.AI),
    Crawler('ChatGPT-User', 'ChatGPT-User', 'OpenAI', CrawlerCategory.AI),
    Crawler('OAI-SearchBot', 'OAI-SearchBot', 'OpenAI', CrawlerCategory.AI),
    Crawler('ClaudeBot', 'ClaudeBot', 'Anthropic', CrawlerCategory.AI),
    Crawler('anthropic-ai', 'Anthropic AI', 'Anthropic', CrawlerCategory.AI),
    Crawler('Claude-Web', 'Claude-Web', 'Anthropic', CrawlerCategory.AI),
    Crawler('Google-Extended', 'Google-Extended', 'Google', CrawlerCategory.AI),
    Crawler('PerplexityBot', 'PerplexityBot', 'Perplexity', CrawlerCategory.AI),
    Crawler('YouBot', 'YouBot', 'You.com', CrawlerCategory.AI),
    Crawler('CCBot', 'CCBot', 'Common Crawl', CrawlerCategory.AI),
    Crawler('Meta-ExternalAgent', 'Meta External Agent', 'Meta', CrawlerCategory.AI),
    Crawler('Bytespider', 'Bytespider', 'ByteDance', CrawlerCategory.AI),
    Crawler('Amazonbot', 'Amazonbot', 'Amazon', CrawlerCategory.AI),
    Crawler('cohere-ai', 'Cohere AI', 'Cohere', CrawlerCategory.AI),
)

PLATFORM_DISALLOWS = {
    Platform.WORDPRESS: (
        '/wp-admin/', '/wp-includes/', '/wp-content/plugins/', '/trackback/',
        '/feed/', '/?s=', '/search/',
    ),
    Platform.SHOPIFY: (
        '/admin/', '/cart/', '/checkout/', '/orders/', '/account/',
        '/*?*variant=', '/collections/*+*', '/search/',
    ),
    Platform.ECOMMERCE: (
        '/cart/', '/checkout/', '/account/', '/wishlist/', '/compare/',
        '/search/', '/*?*sort=', '/*?*filter=',
    ),
    Platform.CUSTOM: ('/admin/', '/api/', '/private/'),
}

STRATEGY_DESCRIPTIONS = {
    Strategy.MAX_VISIBILITY: (
        'Allow all crawlers. Maximum visibility in both traditional search '
        'engines and AI responses.'
    ),
    Strategy.AI_ONLY: (
        'Allow only AI crawlers. Focus on AI search visibility (ChatGPT, '
        'Perplexity, Claude) while blocking traditional search engines.'
    ),
    Strategy.TRADITIONAL: (
        'Allow only traditional search engines. Block all AI crawlers for '
        'maximum content protection.'
    ),
}

DEFAULT_STRATEGY = Strategy.MAX_VISIBILITY
DEFAULT_PLATFORM = Platform.CUSTOM

ATTRIBUTION = '# Generated by Olavi - https://olavi.ai/tools/robots-txt-generator'


def crawlers_by_category(category):
    """
    Return the crawlers of the given category, in catalog order.
    """
    return [crawler for crawler in CRAWLERS if crawler.category == category]


def disallows_for(platform):
    """
    Return the ordered disallow paths of a platform template.

    Accepts either a Platform member or its string value.
    """
    return PLATFORM_DISALLOWS[Platform(platform)]


def describe_strategy(strategy):
    """
    Return the human-readable description of a strategy.
    """
    return STRATEGY_DESCRIPTIONS[Strategy(strategy)]
