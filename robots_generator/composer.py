"""
Compose robots.txt documents from a visibility strategy and a platform template.

The composer is a pure function of its input: it consults only the constant
tables in `robots_generator.catalog` and never raises for a valid Strategy and
Platform. The sitemap URL is treated as opaque text and only trimmed.

Typical usage:
    from robots_generator.composer import GenerationInput, compose

    text = compose(GenerationInput(strategy='aiOnly', platform='wordpress'))
"""

from dataclasses import dataclass

from .catalog import (
    ATTRIBUTION,
    CrawlerCategory,
    DEFAULT_PLATFORM,
    DEFAULT_STRATEGY,
    Platform,
    Strategy,
    crawlers_by_category,
    disallows_for,
)

SECTION_RULE = '# ======================'


@dataclass(frozen=True)
class GenerationInput:
    """
    Configuration of a single robots.txt document.

    Attributes:
        strategy (str): One of the Strategy values.
        platform (str): One of the Platform values.
        sitemap_url (str): Optional sitemap URL, may be empty or whitespace.
    """
    strategy: str = DEFAULT_STRATEGY
    platform: str = DEFAULT_PLATFORM
    sitemap_url: str = ''


def _section_header(title):
    return [SECTION_RULE, f'# {title}', SECTION_RULE]


def compose(generation_input):
    """
    Render the robots.txt document for the given configuration.

    Args:
        generation_input (GenerationInput): strategy, platform and sitemap URL.

    Returns:
        str: The document lines joined with newline characters.
    """
    strategy = Strategy(generation_input.strategy)
    platform = Platform(generation_input.platform)
    sitemap_url = (generation_input.sitemap_url or '').strip()

    lines = []

    lines.extend(_section_header('TRADITIONAL SEARCH ENGINES'))
    for crawler in crawlers_by_category(CrawlerCategory.SEARCH):
        lines.append(f'User-agent: {crawler.user_agent}')
    if strategy == Strategy.AI_ONLY:
        lines.append('Disallow: /')
        lines.append('# Blocked: AI-only visibility strategy')
    else:
        lines.append('Allow: /')
    lines.append('')

    lines.extend(_section_header('AI CRAWLERS'))
    for crawler in crawlers_by_category(CrawlerCategory.AI):
        lines.append(f'User-agent: {crawler.user_agent}')
    if strategy == Strategy.TRADITIONAL:
        lines.append('Disallow: /')
        lines.append('# Blocked: Traditional SEO only strategy')
    else:
        lines.append('Allow: /')
    lines.append('')

    lines.extend(_section_header('ALL OTHER CRAWLERS'))
    lines.append('User-agent: *')
    lines.append('Disallow: /' if strategy == Strategy.AI_ONLY else 'Allow: /')

    disallows = disallows_for(platform)
    if disallows and strategy != Strategy.AI_ONLY:
        lines.append('')
        lines.append(f'# {platform.value.capitalize()} specific rules')
        lines.extend(f'Disallow: {path}' for path in disallows)
    lines.append('')

    if sitemap_url:
        lines.extend(_section_header('SITEMAP'))
        lines.append(f'Sitemap: {sitemap_url}')
        lines.append('')

    lines.append(ATTRIBUTION)

    return '\n'.join(lines)
