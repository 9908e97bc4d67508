"""
This module defines sitemap classes for the robots.txt generator.

Classes:
    StaticViewSitemap: Generates sitemap entries for the public pages, the
    generator form and the API documentation landing page.
"""

from django.contrib.sitemaps import Sitemap
from django.urls import reverse

class StaticViewSitemap(Sitemap):
    """
    Sitemap for static views in the application.

    Attributes:
        priority (float): The priority of the sitemap entries.
        changefreq (str): How frequently the pages are likely to change.

    Methods:
        items(): Returns a list of static view names to include in the sitemap.
        location(item): Returns the URL for a given static view name.
    """
    priority = 0.5
    changefreq = "monthly"
    def items(self):
        return ['generator', 'robots_generator:api_docs_landing']
    def location(self, item):
        return reverse(item)
